"""Tests for the monitor entry points"""

import asyncio
import signal
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest

from adrwatch import cli
from adrwatch.application.scheduler import SchedulerState
from tests.factories import QuoteFactory


def _source():
    async def fetch_quote(symbol: str):
        await asyncio.sleep(0)
        return QuoteFactory.quote(symbol, 100.0, 90.0)

    source = AsyncMock()
    source.fetch_quote.side_effect = fetch_quote
    return source


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.skipif(sys.platform == "win32", reason="loop signal handlers are POSIX only")
async def test_sigterm_stops_monitor_and_closes_source(fast_config):
    source = _source()
    renderer = MagicMock()
    renderer.render.side_effect = lambda snapshot: signal.raise_signal(signal.SIGTERM)

    scheduler = await asyncio.wait_for(
        cli.run_monitor(fast_config, source=source, renderer=renderer), timeout=5
    )

    assert scheduler.stop_requested
    assert scheduler.state is SchedulerState.STOPPED
    assert renderer.render.call_count >= 1
    source.aclose.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_source_closed_when_loop_fails(fast_config, mocker):
    source = _source()
    mocker.patch.object(
        cli.RefreshScheduler, "run", side_effect=RuntimeError("loop crashed")
    )

    with pytest.raises(RuntimeError):
        await cli.run_monitor(fast_config, source=source, renderer=MagicMock())

    source.aclose.assert_awaited_once()


@pytest.mark.unit
def test_main_returns_error_on_bad_configuration(monkeypatch, mocker):
    monkeypatch.setenv("ADRWATCH_REFRESH_SECONDS", "often")
    run_monitor = mocker.patch("adrwatch.cli.run_monitor", new_callable=AsyncMock)

    assert cli.main() == 1
    run_monitor.assert_not_called()


@pytest.mark.unit
def test_main_runs_monitor_and_returns_zero(monkeypatch, mocker):
    monkeypatch.delenv("ADRWATCH_REFRESH_SECONDS", raising=False)
    configure = mocker.patch("adrwatch.cli.configure_logging")
    run_monitor = mocker.patch("adrwatch.cli.run_monitor", new_callable=AsyncMock)

    assert cli.main() == 0
    configure.assert_called_once()
    run_monitor.assert_awaited_once()


@pytest.mark.unit
def test_main_returns_error_on_crash(monkeypatch, mocker):
    monkeypatch.delenv("ADRWATCH_REFRESH_SECONDS", raising=False)
    mocker.patch("adrwatch.cli.configure_logging")
    mocker.patch(
        "adrwatch.cli.run_monitor",
        new_callable=AsyncMock,
        side_effect=RuntimeError("boom"),
    )

    assert cli.main() == 1


@pytest.mark.unit
def test_main_treats_keyboard_interrupt_as_clean_exit(monkeypatch, mocker):
    monkeypatch.delenv("ADRWATCH_REFRESH_SECONDS", raising=False)
    mocker.patch("adrwatch.cli.configure_logging")
    mocker.patch("adrwatch.cli.asyncio.run", side_effect=KeyboardInterrupt)
    mocker.patch("adrwatch.cli.run_monitor", new=MagicMock())

    assert cli.main() == 0
