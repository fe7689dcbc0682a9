"""Yahoo Finance infrastructure module

QuoteRequestClient - HTTP GET with retry logic
YahooQuoteClient - Quote lookup with v8/v10 endpoint fallback
normalize - Response body to canonical Quote
"""

from .client import YahooQuoteClient, create_quote_client
from .normalizer import normalize
from .requests import QuoteRequestClient
from .schemas import SourceVariant

__all__ = [
    "QuoteRequestClient",
    "SourceVariant",
    "YahooQuoteClient",
    "create_quote_client",
    "normalize",
]
