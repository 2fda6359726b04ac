from __future__ import annotations

from finagent.market.formatting import format_large_number, format_percent, format_price
from finagent.tools.base import SymbolArgs, ToolAdapter


class StockQuoteTool(ToolAdapter[SymbolArgs]):
    name = "get_stock_quote"
    description = """Get the current stock price and trading data for a ticker symbol.

Use this when you need to know:
- Current stock price
- Today's price change (up/down)
- Trading volume
- Day's high and low

Input: Stock ticker symbol (e.g., "NVDA", "AAPL", "TSLA", "MSFT")

Returns: Current price, change, percent change, volume, and day's range."""
    args_model = SymbolArgs
    subject = "stock data"

    async def run(self, args: SymbolArgs) -> str:
        quote = await self.client.get_stock_quote(args.symbol)

        up = quote.change >= 0
        lines = [
            f"{'📈' if up else '📉'} {quote.symbol} Stock Quote ({quote.latest_trading_day})",
            "",
            f"**Price: {format_price(quote.price)}** "
            f"({'up' if up else 'down'} {format_percent(quote.change_percent)} today)",
            "",
            "Trading Data:",
            f"- Open: {format_price(quote.open)}",
            f"- High: {format_price(quote.high)}",
            f"- Low: {format_price(quote.low)}",
            f"- Previous Close: {format_price(quote.previous_close)}",
            f"- Volume: {format_large_number(quote.volume)} shares",
            f"- Dollar Change: {'+' if up else '-'}${abs(quote.change):.2f}",
        ]
        return "\n".join(lines)
