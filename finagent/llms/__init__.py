from finagent.llms.agent import EXHAUSTED_MESSAGE, AgentResult, AgentState, FinanceAgent
from finagent.llms.conversation import Conversation

__all__ = ["EXHAUSTED_MESSAGE", "AgentResult", "AgentState", "Conversation", "FinanceAgent"]
