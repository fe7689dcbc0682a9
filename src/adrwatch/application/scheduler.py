"""Refresh scheduler - drives the fetch, convert, render cycle"""

import asyncio
from enum import Enum
from typing import Protocol

from loguru import logger

from adrwatch.core.config import Config
from adrwatch.domain.models import (
    EquityQuote,
    ForexQuote,
    MarketSnapshot,
    Quote,
)
from adrwatch.infrastructure.protocols import QuoteSource
from adrwatch.shared.exceptions import AdrWatchError

from .aggregator import aggregate, quote_fetcher
from .conversion import convert, select_official_rate


class SnapshotRenderer(Protocol):
    """Anything able to display a cycle's snapshot"""

    def render(self, snapshot: MarketSnapshot) -> None: ...


class SchedulerState(Enum):
    """Lifecycle states of the refresh loop

    TESTING -> RUNNING -> [ERROR_BACKOFF -> RUNNING]* -> STOPPED
    """

    IDLE = "idle"
    TESTING = "testing"
    RUNNING = "running"
    ERROR_BACKOFF = "error_backoff"
    STOPPED = "stopped"


class RefreshScheduler:
    """Runs refresh cycles until asked to stop

    Each cycle fetches the forex batch, selects the official rate, fetches
    the equity batch, converts it and hands the snapshot to the renderer.
    Waits between cycles end early when the stop event is set; cancelling
    the task running ``run`` cancels any fetch in flight.
    """

    def __init__(
        self,
        source: QuoteSource,
        renderer: SnapshotRenderer,
        config: Config,
        stop_event: asyncio.Event | None = None,
    ) -> None:
        self._source = source
        self._renderer = renderer
        self._config = config
        self._stop_event = stop_event or asyncio.Event()
        self._fetch = quote_fetcher(source)
        self._state = SchedulerState.IDLE
        self.cycles_completed = 0
        self.cycles_failed = 0

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def stop_requested(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        """Ask the loop to stop at the next cycle boundary"""
        self._stop_event.set()

    async def _wait(self, seconds: float) -> bool:
        """Sleep up to ``seconds``; return True if a stop was requested"""
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return False
        return True

    async def run_diagnostics(self) -> dict[str, Quote | None]:
        """Fetch a few known symbols once, for operator visibility only

        Returns:
            Mapping of symbol to its quote, or None when the fetch failed
        """
        self._state = SchedulerState.TESTING
        logger.info("=== Running connection tests ===")
        results: dict[str, Quote | None] = {}
        for symbol in self._config.diagnostic_symbols:
            try:
                quote = await self._source.fetch_quote(symbol)
            except Exception as e:
                logger.error(f"Connection test failed for {symbol}: {e}")
                results[symbol] = None
                continue

            logger.info(
                f"Connection test ok for {symbol}: {quote.display_name} "
                f"price={quote.price:.2f} previous={quote.previous_close:.2f} "
                f"volume={quote.volume}"
            )
            results[symbol] = quote
        logger.info("=== Connection tests finished ===")
        return results

    async def run_cycle(self) -> MarketSnapshot:
        """Run one fetch, convert, render cycle

        Returns:
            The snapshot that was rendered

        Raises:
            BatchUnavailableError: If either batch could not be aggregated
        """
        self._state = SchedulerState.RUNNING
        logger.info("=== Starting refresh cycle ===")

        logger.info("Fetching forex quotes...")
        forex: list[ForexQuote] = await aggregate(
            self._config.forex_symbols, self._fetch
        )
        logger.info(f"Fetched {len(forex)} forex quotes")

        rate = select_official_rate(forex, self._config.official_rate_marker)

        logger.info("Fetching equity quotes...")
        equities: list[EquityQuote] = await aggregate(
            self._config.equity_symbols, self._fetch
        )
        logger.info(f"Fetched {len(equities)} equity quotes")

        snapshot = MarketSnapshot(
            forex=forex,
            equities=convert(equities, rate.rate, self._config.foreign_market),
            rate=rate,
        )
        self._renderer.render(snapshot)
        return snapshot

    async def run(self) -> None:
        """Run diagnostics, then refresh cycles until stopped"""
        try:
            if self._config.run_diagnostics:
                await self.run_diagnostics()

            while not self.stop_requested:
                try:
                    await self.run_cycle()
                except Exception as e:
                    self.cycles_failed += 1
                    self._state = SchedulerState.ERROR_BACKOFF
                    if isinstance(e, AdrWatchError):
                        logger.error(f"Refresh cycle failed: {e}")
                    else:
                        logger.opt(exception=e).error(
                            f"Unexpected error in refresh cycle: {e!r}"
                        )
                    logger.info(
                        f"Retrying in {self._config.error_backoff_seconds:.0f} seconds..."
                    )
                    if await self._wait(self._config.error_backoff_seconds):
                        break
                    continue

                self.cycles_completed += 1
                logger.debug(
                    f"Waiting {self._config.refresh_interval_seconds:.0f} seconds "
                    "for the next refresh..."
                )
                if await self._wait(self._config.refresh_interval_seconds):
                    break
        finally:
            self._state = SchedulerState.STOPPED
            logger.info("Refresh loop stopped")
