from __future__ import annotations

import json
from typing import Any

import httpx

from finagent.config import ALPHA_VANTAGE_API_KEY, Config
from finagent.errors import (
    CredentialMissingError,
    QuotaExceededError,
    SymbolNotFoundError,
    UpstreamError,
)
from finagent.log import logger
from finagent.market.formatting import format_av_date, map_sentiment_label
from finagent.market.models import CompanyInfo, NewsArticle, StockQuote

DAILY_QUOTA = 25
RATE_LIMITED_MESSAGE = f"Alpha Vantage free tier allows {DAILY_QUOTA} requests/day"


def _to_float(value: Any) -> float | None:
    if value in (None, "", "None", "-"):
        return None
    try:
        return float(str(value).rstrip("%"))
    except ValueError:
        return None


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _is_rate_limited(data: Any) -> bool:
    return "rate limit" in json.dumps(data).lower()


class AlphaVantageClient:
    """
    Read-only Alpha Vantage client for quotes, company overviews and news.

    Every failure is raised as a `FinagentError` subclass so callers can tell
    a missing key from an exhausted quota or an unknown symbol.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://www.alphavantage.co/query",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(cls, config: Config, http_client: httpx.AsyncClient | None = None) -> AlphaVantageClient:
        return cls(
            api_key=config.alpha_vantage_api_key,
            base_url=config.alpha_vantage_base_url,
            timeout=config.http_timeout,
            http_client=http_client,
        )

    async def _query(self, function: str, **params: Any) -> dict[str, Any]:
        if not self.api_key:
            raise CredentialMissingError(ALPHA_VANTAGE_API_KEY)

        try:
            response = await self.client.get(
                self.base_url,
                params={"function": function, **params, "apikey": self.api_key},
            )
        except httpx.HTTPError as e:
            raise UpstreamError(f"Alpha Vantage request failed: {e!r}") from e

        if response.is_error:
            raise UpstreamError(f"Alpha Vantage API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Alpha Vantage returned an invalid JSON payload") from e

        if not isinstance(data, dict):
            raise UpstreamError("Alpha Vantage returned an unexpected payload")
        return data

    async def get_stock_quote(self, symbol: str) -> StockQuote:
        logger.debug(f"Fetching quote for {symbol}")
        data = await self._query("GLOBAL_QUOTE", symbol=symbol)

        quote = data.get("Global Quote") or {}
        if not quote.get("01. symbol"):
            if _is_rate_limited(data):
                raise QuotaExceededError(RATE_LIMITED_MESSAGE)
            raise SymbolNotFoundError(symbol)

        try:
            return StockQuote(
                symbol=quote["01. symbol"],
                price=float(quote["05. price"]),
                change=float(quote["09. change"]),
                change_percent=float(quote["10. change percent"].replace("%", "")),
                open=float(quote["02. open"]),
                high=float(quote["03. high"]),
                low=float(quote["04. low"]),
                volume=_to_int(quote["06. volume"]),
                latest_trading_day=quote["07. latest trading day"],
                previous_close=float(quote["08. previous close"]),
            )
        except (KeyError, ValueError, AttributeError) as e:
            raise UpstreamError(f"Malformed quote payload for {symbol}") from e

    async def get_company_info(self, symbol: str) -> CompanyInfo:
        logger.debug(f"Fetching company info for {symbol}")
        data = await self._query("OVERVIEW", symbol=symbol)

        if not data.get("Symbol"):
            if _is_rate_limited(data):
                raise QuotaExceededError(RATE_LIMITED_MESSAGE)
            raise SymbolNotFoundError(symbol, what="company info")

        return CompanyInfo(
            symbol=data["Symbol"],
            name=data.get("Name") or data["Symbol"],
            description=data.get("Description") or "",
            sector=data.get("Sector") or "",
            industry=data.get("Industry") or "",
            market_cap=_to_int(data.get("MarketCapitalization")),
            pe_ratio=_to_float(data.get("PERatio")),
            dividend_yield=_to_float(data.get("DividendYield")),
            fifty_two_week_high=_to_float(data.get("52WeekHigh")),
            fifty_two_week_low=_to_float(data.get("52WeekLow")),
            analyst_target_price=_to_float(data.get("AnalystTargetPrice")),
        )

    async def get_company_news(self, symbol: str, limit: int = 5) -> list[NewsArticle]:
        logger.debug(f"Fetching news for {symbol}")
        data = await self._query("NEWS_SENTIMENT", tickers=symbol, limit=limit)

        feed = data.get("feed")
        if not feed:
            if _is_rate_limited(data):
                raise QuotaExceededError(RATE_LIMITED_MESSAGE)
            # No news is not an error
            return []

        return [
            NewsArticle(
                title=article.get("title", ""),
                url=article.get("url", ""),
                source=article.get("source", ""),
                summary=article.get("summary", ""),
                published_at=format_av_date(article.get("time_published", "")),
                sentiment=map_sentiment_label(article.get("overall_sentiment_label", "")),
                sentiment_score=_to_float(article.get("overall_sentiment_score")) or 0.0,
            )
            for article in feed[:limit]
        ]

    async def close(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> AlphaVantageClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
