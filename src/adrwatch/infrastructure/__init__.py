"""Infrastructure adapters"""

from .protocols import QuoteSource

__all__ = ["QuoteSource"]
