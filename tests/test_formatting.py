import pytest

from finagent.market.formatting import (
    format_av_date,
    format_large_number,
    format_percent,
    format_price,
    map_sentiment_label,
    truncate,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3_370_000_000_000, "3.37T"),
        (1_500_000_000, "1.50B"),
        (250_000_000, "250.00M"),
        (80_500, "80.50K"),
        (999, "999"),
    ],
)
def test_format_large_number(value, expected):
    assert format_large_number(value) == expected


def test_format_price_and_percent():
    assert format_price(137.7) == "$137.70"
    assert format_percent(3.1) == "+3.10%"
    assert format_percent(0) == "+0.00%"
    assert format_percent(-6.0241) == "-6.02%"


def test_format_av_date():
    assert format_av_date("20250117T143000") == "Jan 17, 2025"
    assert format_av_date("20250302T000000") == "Mar 2, 2025"
    assert format_av_date("not-a-date") == "not-a-date"
    assert format_av_date("") == ""


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Bullish", "positive"),
        ("Somewhat-Bullish", "positive"),
        ("Bearish", "negative"),
        ("Somewhat-Bearish", "negative"),
        ("Neutral", "neutral"),
        ("", "neutral"),
    ],
)
def test_map_sentiment_label(label, expected):
    assert map_sentiment_label(label) == expected


def test_truncate():
    assert truncate("abc", 3) == "abc"
    assert truncate("abcd", 3) == "abc..."
