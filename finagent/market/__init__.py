from finagent.market.client import AlphaVantageClient
from finagent.market.models import CompanyInfo, NewsArticle, StockQuote

__all__ = ["AlphaVantageClient", "CompanyInfo", "NewsArticle", "StockQuote"]
