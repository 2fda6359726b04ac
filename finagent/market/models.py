from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

Sentiment = Literal["positive", "negative", "neutral"]


class StockQuote(BaseModel):
    symbol: str
    price: float
    change: float
    change_percent: float
    open: float
    high: float
    low: float
    volume: int
    latest_trading_day: str
    previous_close: float


class CompanyInfo(BaseModel):
    symbol: str
    name: str
    description: str = ""
    sector: str = ""
    industry: str = ""
    market_cap: int = 0
    pe_ratio: float | None = None
    dividend_yield: float | None = None
    fifty_two_week_high: float | None = None
    fifty_two_week_low: float | None = None
    analyst_target_price: float | None = None


class NewsArticle(BaseModel):
    title: str
    url: str
    source: str
    summary: str
    published_at: str
    sentiment: Sentiment
    sentiment_score: float
