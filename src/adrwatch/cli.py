import asyncio
import signal
import sys

from loguru import logger
from rich.console import Console

from adrwatch.application.scheduler import RefreshScheduler, SnapshotRenderer
from adrwatch.core.config import Config
from adrwatch.core.logging_setup import configure_logging
from adrwatch.infrastructure.protocols import QuoteSource
from adrwatch.infrastructure.yahoo import create_quote_client
from adrwatch.presentation import Dashboard
from adrwatch.shared.exceptions import ConfigurationError


async def run_monitor(
    config: Config,
    source: QuoteSource | None = None,
    renderer: SnapshotRenderer | None = None,
) -> RefreshScheduler:
    """Run the refresh loop until SIGINT/SIGTERM

    The signal handler sets the stop event and cancels the refresh task, so
    fetches in flight are aborted instead of left running.

    Args:
        config: Loaded configuration
        source: Quote source (defaults to the Yahoo client)
        renderer: Snapshot renderer (defaults to the terminal dashboard)

    Returns:
        The scheduler, once stopped
    """
    source = source or create_quote_client(config.http)
    renderer = renderer or Dashboard(foreign_market=config.foreign_market)
    stop_event = asyncio.Event()
    scheduler = RefreshScheduler(source, renderer, config, stop_event)

    loop = asyncio.get_running_loop()
    task = asyncio.create_task(scheduler.run(), name="adrwatch-refresh")

    def request_shutdown() -> None:
        logger.info("Termination requested, stopping refresh loop...")
        stop_event.set()
        task.cancel()

    installed: list[signal.Signals] = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, request_shutdown)
            installed.append(sig)
        except (NotImplementedError, RuntimeError):
            # Not supported on this platform; Ctrl+C still raises KeyboardInterrupt
            pass

    try:
        await task
    except asyncio.CancelledError:
        if not stop_event.is_set():
            raise
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)
        await source.aclose()

    return scheduler


def main() -> int:
    """CLI entry point for the monitor

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        config = Config.from_env()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    configure_logging(config.log_level, config.log_dir)
    logger.info("Starting Argentine market and exchange rate monitor...")

    try:
        asyncio.run(run_monitor(config))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.opt(exception=e).critical(f"Unhandled exception in monitor: {e}")
        return 1

    Console().print("\n[bold]Monitoring stopped.[/bold]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
