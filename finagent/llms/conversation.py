from __future__ import annotations

from pydantic_ai.messages import (
    ModelMessage,
    ModelRequest,
    ModelResponse,
    SystemPromptPart,
    ToolCallPart,
    ToolReturnPart,
    UserPromptPart,
)


class Conversation:
    """
    Append-only message history for a single request.

    The first message holds the system instructions and the user prompt.
    Tool calls of the latest response stay pending until exactly one result
    per call id has been added; no other response can be added meanwhile.
    """

    def __init__(self, system_prompt: str, user_prompt: str) -> None:
        self._messages: list[ModelMessage] = [
            ModelRequest(
                parts=[
                    SystemPromptPart(content=system_prompt),
                    UserPromptPart(content=user_prompt),
                ]
            )
        ]
        self._pending: dict[str, ToolCallPart] = {}

    @property
    def messages(self) -> list[ModelMessage]:
        return list(self._messages)

    def add_response(self, response: ModelResponse) -> list[ToolCallPart]:
        """Append a model response and return the tool calls it requests."""
        if self._pending:
            raise ValueError(f"Tool calls still waiting for results: {list(self._pending)}")

        tool_calls = [part for part in response.parts if isinstance(part, ToolCallPart)]
        pending = {part.tool_call_id: part for part in tool_calls}
        if len(pending) != len(tool_calls):
            raise ValueError("Model response contains duplicate tool call ids")

        self._messages.append(response)
        self._pending = pending
        return tool_calls

    def add_tool_results(self, results: list[ToolReturnPart]) -> None:
        result_ids = [result.tool_call_id for result in results]
        if sorted(result_ids) != sorted(self._pending):
            raise ValueError(
                f"Tool results {result_ids} do not match pending tool calls {list(self._pending)}"
            )

        self._messages.append(ModelRequest(parts=list(results)))
        self._pending = {}
