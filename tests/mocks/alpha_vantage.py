from __future__ import annotations

from typing import Any

import httpx

RATE_LIMIT_PAYLOAD = {
    "Information": (
        "Thank you for using Alpha Vantage! Our standard API rate limit is 25 requests per day. "
        "Please subscribe to any of the premium plans to instantly remove all daily rate limits."
    )
}

QUOTES: dict[str, dict[str, str]] = {
    "NVDA": {
        "01. symbol": "NVDA",
        "02. open": "135.0000",
        "03. high": "138.5000",
        "04. low": "134.2000",
        "05. price": "137.7100",
        "06. volume": "250000000",
        "07. latest trading day": "2025-01-17",
        "08. previous close": "133.5700",
        "09. change": "4.1400",
        "10. change percent": "3.1000%",
    },
    "INTC": {
        "01. symbol": "INTC",
        "02. open": "20.5000",
        "03. high": "20.6000",
        "04. low": "19.2500",
        "05. price": "19.5000",
        "06. volume": "80500000",
        "07. latest trading day": "2025-01-17",
        "08. previous close": "20.7500",
        "09. change": "-1.2500",
        "10. change percent": "-6.0241%",
    },
}

OVERVIEWS: dict[str, dict[str, str]] = {
    "NVDA": {
        "Symbol": "NVDA",
        "Name": "NVIDIA Corporation",
        "Description": "NVIDIA designs graphics processors.",
        "Sector": "TECHNOLOGY",
        "Industry": "SEMICONDUCTORS & RELATED DEVICES",
        "MarketCapitalization": "3370000000000",
        "PERatio": "54.25",
        "DividendYield": "0.0003",
        "52WeekHigh": "153.13",
        "52WeekLow": "66.25",
        "AnalystTargetPrice": "173.5",
    },
    "RIVN": {
        "Symbol": "RIVN",
        "Name": "Rivian Automotive Inc",
        "Description": "R" * 600,
        "Sector": "MANUFACTURING",
        "Industry": "MOTOR VEHICLES & PASSENGER CAR BODIES",
        "MarketCapitalization": "12500000000",
        "PERatio": "None",
        "DividendYield": "None",
        "52WeekHigh": "18.86",
        "52WeekLow": "8.26",
        "AnalystTargetPrice": "None",
    },
}

NEWS: dict[str, list[dict[str, Any]]] = {
    "NVDA": [
        {
            "title": "Nvidia beats estimates",
            "url": "https://example.com/nvda-1",
            "source": "Reuters",
            "summary": "Strong data center demand.",
            "time_published": "20250117T143000",
            "overall_sentiment_score": 0.45,
            "overall_sentiment_label": "Bullish",
        },
        {
            "title": "Chip stocks slip",
            "url": "https://example.com/nvda-2",
            "source": "Bloomberg",
            "summary": "Export concerns weigh.",
            "time_published": "20250116T090000",
            "overall_sentiment_score": -0.05,
            "overall_sentiment_label": "Neutral",
        },
    ],
}


class MockAlphaVantage:
    """httpx.MockTransport handler answering like the Alpha Vantage query endpoint."""

    def __init__(self) -> None:
        self.requests: list[dict[str, str]] = []
        self.rate_limited = False
        self.status_code = 200

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        params = dict(request.url.params)
        self.requests.append(params)

        if self.status_code != 200:
            return httpx.Response(self.status_code, text="Service Unavailable")
        if self.rate_limited:
            return httpx.Response(200, json=RATE_LIMIT_PAYLOAD)

        function = params.get("function")
        if function == "GLOBAL_QUOTE":
            return httpx.Response(200, json={"Global Quote": QUOTES.get(params["symbol"], {})})
        if function == "OVERVIEW":
            return httpx.Response(200, json=OVERVIEWS.get(params["symbol"], {}))
        if function == "NEWS_SENTIMENT":
            feed = NEWS.get(params["tickers"], [])
            return httpx.Response(200, json={"items": str(len(feed)), "feed": feed[: int(params["limit"])]})
        return httpx.Response(200, json={"Error Message": "Invalid API call."})
