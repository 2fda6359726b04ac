from __future__ import annotations

from datetime import datetime

from finagent.market.models import Sentiment


def format_large_number(num: float) -> str:
    for threshold, suffix in ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K")):
        if num >= threshold:
            return f"{num / threshold:.2f}{suffix}"
    return str(num)


def format_price(price: float) -> str:
    return f"${price:.2f}"


def format_percent(percent: float) -> str:
    sign = "+" if percent >= 0 else ""
    return f"{sign}{percent:.2f}%"


def format_av_date(value: str) -> str:
    """
    `20250117T143000` -> `Jan 17, 2025`. Anything unparseable is returned as is.
    """
    try:
        parsed = datetime.strptime(value[:8], "%Y%m%d")
    except (TypeError, ValueError):
        return value
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def map_sentiment_label(label: str) -> Sentiment:
    lower = (label or "").lower()
    if "bullish" in lower or "positive" in lower:
        return "positive"
    if "bearish" in lower or "negative" in lower:
        return "negative"
    return "neutral"


def truncate(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text
