"""Domain models"""

from .quote import (
    DerivedQuote,
    EquityQuote,
    ForexQuote,
    MarketSnapshot,
    Quote,
    QuoteCategory,
    RateContext,
    SymbolRequest,
    compute_change,
    derive_quote,
)

__all__ = [
    "Quote",
    "QuoteCategory",
    "SymbolRequest",
    "ForexQuote",
    "EquityQuote",
    "DerivedQuote",
    "RateContext",
    "MarketSnapshot",
    "compute_change",
    "derive_quote",
]
