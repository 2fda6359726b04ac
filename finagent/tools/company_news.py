from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from finagent.market.formatting import truncate
from finagent.market.models import NewsArticle
from finagent.tools.base import SymbolArgs, ToolAdapter

MIN_ARTICLES = 1
MAX_ARTICLES = 10
DEFAULT_ARTICLES = 5
SUMMARY_LIMIT = 200

# Average sentiment score beyond which the feed counts as bullish / bearish
SENTIMENT_THRESHOLD = 0.15

SENTIMENT_EMOJI = {"positive": "🟢", "negative": "🔴", "neutral": "🟡"}


class NewsArgs(SymbolArgs):
    limit: int = Field(
        DEFAULT_ARTICLES,
        ge=MIN_ARTICLES,
        le=MAX_ARTICLES,
        description=f"Number of articles to fetch ({MIN_ARTICLES}-{MAX_ARTICLES}, default {DEFAULT_ARTICLES})",
    )

    @field_validator("limit", mode="before")
    @classmethod
    def clamp_limit(cls, value: Any) -> int:
        if value is None or isinstance(value, bool):
            return DEFAULT_ARTICLES
        try:
            value = int(value)
        except (TypeError, ValueError):
            return DEFAULT_ARTICLES
        return max(MIN_ARTICLES, min(MAX_ARTICLES, value))


def overall_sentiment(articles: list[NewsArticle]) -> tuple[str, float]:
    score = sum(a.sentiment_score for a in articles) / len(articles)
    if score > SENTIMENT_THRESHOLD:
        return "🟢 Bullish", score
    if score < -SENTIMENT_THRESHOLD:
        return "🔴 Bearish", score
    return "🟡 Neutral", score


class CompanyNewsTool(ToolAdapter[NewsArgs]):
    name = "get_company_news"
    description = """Get recent news articles about a company with sentiment analysis.

Use this when you need to know:
- Recent news and headlines about a company
- Current market sentiment (bullish/bearish)
- What events might be affecting the stock price

Input: Stock ticker symbol and optional limit on number of articles

Returns: List of recent news articles with titles, summaries, sources, and sentiment scores."""
    args_model = NewsArgs
    subject = "news"

    async def run(self, args: NewsArgs) -> str:
        articles = await self.client.get_company_news(args.symbol, args.limit)
        if not articles:
            return f"📰 No recent news found for {args.symbol}."

        label, score = overall_sentiment(articles)
        lines = [
            f"📰 **Recent News for {args.symbol}**",
            f"Overall Sentiment: {label} (score: {score:.2f})",
            "",
        ]
        for index, article in enumerate(articles, start=1):
            lines += [
                f"**{index}. {article.title}**",
                f"   {SENTIMENT_EMOJI[article.sentiment]} {article.sentiment.upper()} | "
                f"{article.source} | {article.published_at}",
                f"   {truncate(article.summary, SUMMARY_LIMIT)}",
                "",
            ]
        return "\n".join(lines)
