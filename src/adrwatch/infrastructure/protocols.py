"""Protocols for pluggable quote data sources.

The scheduler and aggregator depend on these interfaces only, so the
upstream API can be swapped without touching the refresh pipeline.
"""

from typing import Protocol, runtime_checkable

from adrwatch.domain.models import Quote


@runtime_checkable
class QuoteSource(Protocol):
    """Protocol for single-symbol quote retrieval."""

    async def fetch_quote(self, symbol: str) -> Quote:
        """Fetch a canonical quote for one symbol."""
        ...

    async def aclose(self) -> None:
        """Release pooled connections."""
        ...
