from __future__ import annotations

import json
from collections.abc import AsyncIterator
from typing import Any

import httpx
from fastapi import Depends, Request
from pydantic import ValidationError
from pydantic_ai.models import Model

from finagent.config import ALPHA_VANTAGE_API_KEY, OPENAI_API_KEY, Config, get_config
from finagent.errors import CredentialMissingError, ErrorKind, FinagentError, InvalidRequestError
from finagent.llms.agent import FinanceAgent
from finagent.llms.models import get_default_model, get_model_settings
from finagent.log import logger
from finagent.market.client import AlphaVantageClient
from finagent.router.params import ChatRequest, StreamEvent
from finagent.tools.registry import ToolRegistry

RESEARCHING = "Researching..."

INVALID_BODY = "Invalid request body"
EMPTY_MESSAGE = "Please provide a message"
GENERIC_FAILURE = "Something went wrong. Please try again."
CREDENTIAL_MESSAGES = {
    OPENAI_API_KEY: "OpenAI API key is not configured.",
    ALPHA_VANTAGE_API_KEY: "Alpha Vantage API key is not configured.",
}


def get_http_client(request: Request) -> httpx.AsyncClient | None:
    return getattr(request.app.state, "http_client", None)


def get_chat_controller(
    config: Config = Depends(get_config),
    model: Model | None = Depends(get_default_model),
    http_client: httpx.AsyncClient | None = Depends(get_http_client),
) -> ChatController:
    return ChatController(config, model, http_client)


def normalize_message(message: str, max_length: int) -> str:
    """Strip and truncate. Applying it twice gives the same result as once."""
    return message.strip()[:max_length].rstrip()


def error_message(error: FinagentError) -> str:
    if error.kind is ErrorKind.VALIDATION:
        return str(error)
    if error.kind is ErrorKind.CREDENTIAL_MISSING:
        return CREDENTIAL_MESSAGES.get(getattr(error, "credential", ""), GENERIC_FAILURE)
    return GENERIC_FAILURE


class ChatController:
    def __init__(
        self,
        config: Config,
        model: Model | None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.model = model
        self.http_client = http_client

    def parse_message(self, body: bytes | str | Any) -> str:
        if isinstance(body, (bytes, str)):
            try:
                body = json.loads(body)
            except ValueError as e:
                raise InvalidRequestError(INVALID_BODY) from e

        if not isinstance(body, dict):
            raise InvalidRequestError(INVALID_BODY)

        try:
            params = ChatRequest.model_validate(body)
        except ValidationError as e:
            raise InvalidRequestError(EMPTY_MESSAGE) from e

        return normalize_message(params.message, self.config.max_message_length)

    def check_credentials(self) -> Model:
        self.config.require_credentials()
        if self.model is None:
            raise CredentialMissingError(OPENAI_API_KEY)
        return self.model

    def build_agent(self, model: Model, registry: ToolRegistry) -> FinanceAgent:
        return FinanceAgent(
            model,
            registry,
            max_iterations=self.config.max_iterations,
            timeout=self.config.timeout,
            model_settings=get_model_settings(self.config),
        )

    async def chat(self, body: bytes | str | Any) -> AsyncIterator[StreamEvent]:
        try:
            message = self.parse_message(body)
            model = self.check_credentials()

            logger.info(f"[API/Finance] Received: {message[:50]!r}")
            yield StreamEvent.thought(RESEARCHING)

            async with AlphaVantageClient.from_config(self.config, http_client=self.http_client) as client:
                agent = self.build_agent(model, ToolRegistry.for_client(client))
                result = await agent.run(message)

            yield StreamEvent.message(result.output)
            logger.info("[API/Finance] Response sent successfully")
        except FinagentError as e:
            if e.kind is ErrorKind.VALIDATION:
                logger.info(f"[API/Finance] Rejected request: {e}")
            else:
                logger.opt(exception=e).error(f"[API/Finance] {e.kind.value}: {e}")
            yield StreamEvent.error(error_message(e))
        except Exception as e:
            logger.exception(f"[API/Finance] Error: {e}")
            yield StreamEvent.error(GENERIC_FAILURE)
