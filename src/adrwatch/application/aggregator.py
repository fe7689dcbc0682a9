"""Parallel aggregation of quote batches"""

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

from loguru import logger

from adrwatch.domain.models import DerivedQuote, SymbolRequest, derive_quote
from adrwatch.infrastructure.protocols import QuoteSource
from adrwatch.shared.exceptions import BatchUnavailableError, QuoteFetchError

T = TypeVar("T")

Fetcher = Callable[[SymbolRequest], Awaitable[T]]


def unique_requests(requests: Iterable[SymbolRequest]) -> list[SymbolRequest]:
    """Drop repeated symbols, keeping the first occurrence"""
    seen: set[str] = set()
    unique: list[SymbolRequest] = []
    for request in requests:
        if request.symbol in seen:
            continue
        seen.add(request.symbol)
        unique.append(request)
    return unique


def quote_fetcher(source: QuoteSource) -> Fetcher[DerivedQuote]:
    """Wrap a quote source into a fetcher that derives change figures

    Args:
        source: Data source used for the raw quote

    Returns:
        Async callable mapping a SymbolRequest to a ForexQuote or EquityQuote
    """

    async def fetch(request: SymbolRequest) -> DerivedQuote:
        quote = await source.fetch_quote(request.symbol)
        return derive_quote(request, quote)

    return fetch


async def aggregate(
    requests: Iterable[SymbolRequest], fetch: Fetcher[T]
) -> list[T]:
    """Fetch a batch of symbols concurrently, tolerating individual failures

    One task is started per unique symbol. Each task returns its own result
    and the results are merged once every task has finished. Failed symbols
    are logged and left out; they never abort their siblings.

    Args:
        requests: Symbols to fetch
        fetch: Async callable producing the result for one request

    Returns:
        Successful results, at most one per requested symbol

    Raises:
        BatchUnavailableError: If the batch could not be scheduled
    """
    batch = unique_requests(requests)
    if not batch:
        return []

    tasks: list[asyncio.Future] = []
    try:
        for request in batch:
            tasks.append(asyncio.ensure_future(fetch(request)))
    except Exception as e:
        for task in tasks:
            task.cancel()
        raise BatchUnavailableError(f"could not schedule batch: {e}") from e

    outcomes = await asyncio.gather(*tasks, return_exceptions=True)

    results: list[T] = []
    failures = 0
    for request, outcome in zip(batch, outcomes):
        if isinstance(outcome, QuoteFetchError):
            failures += 1
            logger.error(f"Error fetching data for {request.symbol}: {outcome}")
        elif isinstance(outcome, BaseException):
            failures += 1
            logger.opt(exception=outcome).error(
                f"Unexpected error fetching data for {request.symbol}: {outcome!r}"
            )
        else:
            results.append(outcome)

    logger.debug(
        f"Batch finished: {len(results)} ok, {failures} failed of {len(batch)}"
    )
    return results
