from __future__ import annotations

from pydantic_ai.tools import ToolDefinition

from finagent.market.client import AlphaVantageClient
from finagent.tools.base import ToolAdapter
from finagent.tools.company_info import CompanyInfoTool
from finagent.tools.company_news import CompanyNewsTool
from finagent.tools.quote import StockQuoteTool

TOOL_TYPES: tuple[type[ToolAdapter], ...] = (StockQuoteTool, CompanyInfoTool, CompanyNewsTool)


class ToolRegistry:
    """
    The fixed set of tools offered to the model, built once per request.
    """

    def __init__(self, tools: list[ToolAdapter]) -> None:
        self.tools: dict[str, ToolAdapter] = {}
        for tool in tools:
            if tool.name in self.tools:
                raise ValueError(f"Tool {tool.name} registered twice")
            self.tools[tool.name] = tool

    @classmethod
    def for_client(cls, client: AlphaVantageClient) -> ToolRegistry:
        return cls([tool_type(client) for tool_type in TOOL_TYPES])

    def get(self, name: str) -> ToolAdapter | None:
        """Exact-match lookup, `None` for a name the registry does not know."""
        return self.tools.get(name)

    def definitions(self) -> list[ToolDefinition]:
        return [tool.definition() for tool in self.tools.values()]
