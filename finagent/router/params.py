from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, field_validator

StreamEventType = Literal["thought", "message", "error"]


class StreamEvent(BaseModel):
    type: StreamEventType
    content: str

    @property
    def is_terminal(self) -> bool:
        return self.type != "thought"

    @classmethod
    def thought(cls, content: str) -> StreamEvent:
        return cls(type="thought", content=content)

    @classmethod
    def message(cls, content: str) -> StreamEvent:
        return cls(type="message", content=content)

    @classmethod
    def error(cls, content: str) -> StreamEvent:
        return cls(type="error", content=content)


class ChatRequest(BaseModel):
    message: str

    @field_validator("message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value


class ToolInfo(BaseModel):
    name: str
    description: str
    parameters: dict[str, Any]


class GetAgentConfigResponse(BaseModel):
    model_name: str
    max_iterations: int
    timeout: float
    max_message_length: int
    tools: list[ToolInfo]

    model_config = {"protected_namespaces": ()}
