from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_ai.tools import ToolDefinition

from finagent.errors import (
    CredentialMissingError,
    FinagentError,
    QuotaExceededError,
    SymbolNotFoundError,
)
from finagent.log import logger
from finagent.market.client import RATE_LIMITED_MESSAGE, AlphaVantageClient

WARNING_MARKER = "⚠️"

ArgsT = TypeVar("ArgsT", bound=BaseModel)


class SymbolArgs(BaseModel):
    symbol: str = Field(description="Stock ticker symbol (e.g., NVDA, AAPL, TSLA)")

    @field_validator("symbol")
    @classmethod
    def normalize_symbol(cls, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise ValueError("symbol must not be empty")
        return value


def warning(text: str) -> str:
    return f"{WARNING_MARKER} {text}"


class ToolAdapter(ABC, Generic[ArgsT]):
    """
    One market-data read exposed to the model as a tool.

    `execute` never raises (cancellation aside): every failure comes back as
    text starting with `WARNING_MARKER`, so the model can read it and adapt.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    args_model: ClassVar[type[BaseModel]]
    # What the tool fetches, used in error text
    subject: ClassVar[str]

    def __init__(self, client: AlphaVantageClient) -> None:
        self.client = client

    @classmethod
    def definition(cls) -> ToolDefinition:
        return ToolDefinition(
            name=cls.name,
            description=cls.description,
            parameters_json_schema=cls.args_model.model_json_schema(),
        )

    @abstractmethod
    async def run(self, args: ArgsT) -> str:
        pass

    async def execute(self, args: Mapping[str, Any] | None) -> str:
        try:
            parsed = self.args_model.model_validate(dict(args or {}))
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"]) or "arguments"
            return warning(f"Invalid arguments for {self.name}: {fields}.")

        logger.info(f"[Tool:{self.name}] Fetching {self.subject} for {parsed.symbol}")
        try:
            return await self.run(parsed)
        except FinagentError as e:
            logger.warning(f"[Tool:{self.name}] {e.kind.value}: {e}")
            return self.render_error(e, parsed.symbol)
        except Exception as e:
            logger.exception(f"[Tool:{self.name}] Unexpected error: {e}")
            return warning(f"Error fetching {self.subject}. Please try again.")

    def render_error(self, error: FinagentError, symbol: str) -> str:
        if isinstance(error, CredentialMissingError):
            return warning(f"{error.credential} is not configured, market data is unavailable.")
        if isinstance(error, QuotaExceededError):
            return warning(
                f"API rate limit reached. {RATE_LIMITED_MESSAGE}. Try again tomorrow or upgrade your API key."
            )
        if isinstance(error, SymbolNotFoundError):
            return warning(f'Could not find {self.subject} for "{symbol}". Make sure it\'s a valid US stock ticker.')
        return warning(f"Error fetching {self.subject}. Please try again.")
