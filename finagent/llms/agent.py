from __future__ import annotations

import asyncio
import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic_ai.direct import model_request
from pydantic_ai.exceptions import AgentRunError
from pydantic_ai.messages import ModelMessage, ModelResponse, TextPart, ToolCallPart, ToolReturnPart
from pydantic_ai.models import Model, ModelRequestParameters
from pydantic_ai.settings import ModelSettings

from finagent.errors import AgentTimeoutError, UpstreamError
from finagent.llms.conversation import Conversation
from finagent.llms.prompts import FINANCE_AGENT_SYSTEM_PROMPT
from finagent.log import logger
from finagent.tools.base import warning
from finagent.tools.registry import ToolRegistry

DEFAULT_MAX_ITERATIONS = 10
DEFAULT_TIMEOUT = 30.0

EXHAUSTED_MESSAGE = "I was unable to complete the research. Please try a simpler question."


class AgentState(str, enum.Enum):
    AWAITING_MODEL = "awaiting-model"
    EXECUTING_TOOLS = "executing-tools"
    DONE = "done"
    EXHAUSTED = "exhausted"


@dataclass
class AgentResult:
    output: str
    state: AgentState
    iterations: int
    messages: list[ModelMessage] = field(default_factory=list)


def response_text(response: ModelResponse) -> str:
    return "".join(part.content for part in response.parts if isinstance(part, TextPart))


class FinanceAgent:
    """
    Tool-calling loop: ask the model, run every tool it requests concurrently,
    hand the results back, and repeat until it answers without tool calls or
    `max_iterations` model requests have been spent.

    The whole run is bounded by `timeout` seconds. Cancelling the run (timeout
    or client disconnect) cancels the tool calls still in flight.
    """

    def __init__(
        self,
        model: Model,
        registry: ToolRegistry,
        *,
        system_prompt: str = FINANCE_AGENT_SYSTEM_PROMPT,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        timeout: float | None = DEFAULT_TIMEOUT,
        model_settings: ModelSettings | None = None,
    ):
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

        self.model = model
        self.registry = registry
        self.system_prompt = system_prompt
        self.max_iterations = max_iterations
        self.timeout = timeout
        self.model_settings = model_settings

        self.state = AgentState.AWAITING_MODEL
        self._conversation: Conversation | None = None

    async def run(self, query: str) -> AgentResult:
        logger.info(f"[FinanceAgent] Running query: {query[:50]!r}")
        self._conversation = Conversation(self.system_prompt, query)
        try:
            async with asyncio.timeout(self.timeout):
                return await self._loop(self._conversation)
        except TimeoutError as e:
            logger.warning(f"[FinanceAgent] Gave up after {self.timeout}s")
            raise AgentTimeoutError(f"Agent did not finish within {self.timeout}s") from e

    async def _loop(self, conversation: Conversation) -> AgentResult:
        for iteration in range(1, self.max_iterations + 1):
            self.state = AgentState.AWAITING_MODEL
            logger.info(f"[FinanceAgent] Iteration {iteration}")

            response = await self.request(conversation.messages)
            tool_calls = conversation.add_response(response)

            if not tool_calls:
                self.state = AgentState.DONE
                logger.info(f"[FinanceAgent] Completed after {iteration} iterations")
                return AgentResult(
                    output=response_text(response),
                    state=self.state,
                    iterations=iteration,
                    messages=conversation.messages,
                )

            self.state = AgentState.EXECUTING_TOOLS
            logger.info(f"[FinanceAgent] Executing {len(tool_calls)} tool(s) in parallel")
            conversation.add_tool_results(await self.execute_tool_calls(tool_calls))

        self.state = AgentState.EXHAUSTED
        logger.warning("[FinanceAgent] Max iterations reached")
        return AgentResult(
            output=EXHAUSTED_MESSAGE,
            state=self.state,
            iterations=self.max_iterations,
            messages=conversation.messages,
        )

    async def request(self, messages: list[ModelMessage]) -> ModelResponse:
        try:
            return await model_request(
                self.model,
                messages,
                model_settings=self.model_settings,
                model_request_parameters=ModelRequestParameters(function_tools=self.registry.definitions()),
            )
        except (AgentRunError, httpx.HTTPError) as e:
            raise UpstreamError(f"Model request failed: {e}") from e

    async def execute_tool_calls(self, tool_calls: Sequence[ToolCallPart]) -> list[ToolReturnPart]:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(self._execute_one_tool_call_part(part)) for part in tool_calls]
        return [task.result() for task in tasks]

    async def _execute_one_tool_call_part(self, tool_call_part: ToolCallPart) -> ToolReturnPart:
        content = await self._call_tool(tool_call_part)
        return ToolReturnPart(
            tool_name=tool_call_part.tool_name,
            content=content,
            tool_call_id=tool_call_part.tool_call_id,
        )

    async def _call_tool(self, tool_call_part: ToolCallPart) -> str:
        tool = self.registry.get(tool_call_part.tool_name)
        if tool is None:
            logger.warning(f"[FinanceAgent] Unknown tool: {tool_call_part.tool_name}")
            return warning(f"Unknown tool: {tool_call_part.tool_name}")

        try:
            args: dict[str, Any] = tool_call_part.args_as_dict()
        except ValueError:
            return warning(f"Invalid arguments for {tool_call_part.tool_name}: arguments are not valid JSON.")

        logger.info(f"[FinanceAgent] Calling: {tool_call_part.tool_name}")
        return await tool.execute(args)

    def all_messages(self) -> list[ModelMessage]:
        if self._conversation is None:
            # No run has been made yet
            return []
        return self._conversation.messages
