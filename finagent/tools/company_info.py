from __future__ import annotations

from finagent.market.formatting import format_large_number, format_price, truncate
from finagent.tools.base import SymbolArgs, ToolAdapter

DESCRIPTION_LIMIT = 500


class CompanyInfoTool(ToolAdapter[SymbolArgs]):
    name = "get_company_info"
    description = """Get fundamental information about a company.

Use this when you need to know:
- What the company does (business description)
- What sector/industry they're in
- Market capitalization
- P/E ratio and dividend yield
- 52-week high and low
- Analyst target price

Input: Stock ticker symbol (e.g., "NVDA", "AAPL", "TSLA")

Returns: Company description, sector, market cap, valuation metrics, and analyst targets."""
    args_model = SymbolArgs
    subject = "company info"

    async def run(self, args: SymbolArgs) -> str:
        info = await self.client.get_company_info(args.symbol)

        lines = [
            f"🏢 **{info.name}** ({info.symbol})",
            "",
            f"**About:** {truncate(info.description, DESCRIPTION_LIMIT)}",
            "",
            f"**Sector:** {info.sector}",
            f"**Industry:** {info.industry}",
            "",
            "**Key Metrics:**",
            f"- Market Cap: ${format_large_number(info.market_cap)}",
        ]
        if info.pe_ratio is not None:
            lines.append(f"- P/E Ratio: {info.pe_ratio:.2f}")
        else:
            lines.append("- P/E Ratio: N/A (company may not be profitable)")
        if info.dividend_yield:
            lines.append(f"- Dividend Yield: {info.dividend_yield * 100:.2f}%")

        if info.fifty_two_week_low is not None and info.fifty_two_week_high is not None:
            lines += [
                "",
                "**52-Week Range:**",
                f"- Low: {format_price(info.fifty_two_week_low)}",
                f"- High: {format_price(info.fifty_two_week_high)}",
            ]

        if info.analyst_target_price is not None:
            lines += ["", f"**Analyst Target Price:** {format_price(info.analyst_target_price)}"]

        return "\n".join(lines)
