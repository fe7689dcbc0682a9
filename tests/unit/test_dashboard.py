"""Tests for the terminal dashboard"""

import io
from datetime import datetime

import pytest
from rich.console import Console

from adrwatch.domain.models import MarketSnapshot, RateContext
from adrwatch.presentation import Dashboard
from adrwatch.presentation.dashboard import format_change, truncate_name
from tests.factories import QuoteFactory


def _render(snapshot: MarketSnapshot) -> str:
    console = Console(file=io.StringIO(), record=True, width=140)
    Dashboard(console=console, clear_screen=False).render(snapshot)
    return console.export_text()


@pytest.mark.unit
class TestHelpers:
    def test_format_change_signs(self):
        assert format_change(10.0, 11.111) == "+10.00 (+11.11%)"
        assert format_change(-0.5, -1.25) == "-0.50 (-1.25%)"

    def test_truncate_name(self):
        assert truncate_name("x" * 45) == "x" * 30
        assert truncate_name("Short") == "Short"


@pytest.mark.unit
def test_renders_forex_with_configured_names():
    snapshot = MarketSnapshot(
        forex=[
            QuoteFactory.forex("ARS=X", "Dólar Oficial", price=1000.0, previous_close=950.0)
        ],
        equities=[],
        updated_at=datetime(2024, 3, 1, 15, 30, 0),
    )

    text = _render(snapshot)

    assert "=== EXCHANGE RATES ===" in text
    assert "Updated: 2024-03-01 15:30:00" in text
    assert "Dólar Oficial" in text
    assert "$1000.00" in text
    assert "+50.00 (+5.26%)" in text
    assert "Press Ctrl+C to stop the monitor" in text


@pytest.mark.unit
def test_empty_sections_show_no_data_messages():
    text = _render(MarketSnapshot(forex=[], equities=[]))

    assert "No exchange rate data available" in text
    assert "No stock market data available" in text


@pytest.mark.unit
def test_equities_sorted_by_symbol():
    equities = [
        QuoteFactory.equity("YPF", display_name="Alpha Energy"),
        QuoteFactory.equity("BMA", display_name="Gamma Bank"),
        QuoteFactory.equity("GGAL", display_name="Beta Group"),
    ]

    text = _render(MarketSnapshot(forex=[], equities=equities))

    positions = [text.index(name) for name in ("Gamma Bank", "Beta Group", "Alpha Energy")]
    assert positions == sorted(positions)


@pytest.mark.unit
def test_only_foreign_market_listings_are_shown():
    equities = [
        QuoteFactory.equity("YPF", display_name="Listed Abroad"),
        QuoteFactory.equity("YPFD.BA", market="BCBA", display_name="Listed Locally"),
    ]

    text = _render(MarketSnapshot(forex=[], equities=equities))

    assert "Listed Abroad" in text
    assert "Listed Locally" not in text


@pytest.mark.unit
def test_long_names_are_truncated():
    name = "A" * 30 + "TAILTEXT"
    text = _render(
        MarketSnapshot(forex=[], equities=[QuoteFactory.equity("TS", display_name=name)])
    )

    assert "A" * 30 in text
    assert "TAILTEXT" not in text


@pytest.mark.unit
def test_currency_label_follows_conversion():
    equity = QuoteFactory.equity("YPF", price=100.0, previous_close=90.0)

    usd = _render(MarketSnapshot(forex=[], equities=[equity]))
    pesos = _render(
        MarketSnapshot(
            forex=[],
            equities=[equity.converted_at(1000.0)],
            rate=RateContext(rate=1000.0, source_symbol="ARS=X"),
        )
    )

    assert "(in USD)" in usd
    assert "(in pesos)" in pesos
    assert "$100000.00" in pesos
    assert "+10000.00 (+11.11%)" in pesos


@pytest.mark.unit
def test_markup_in_names_is_not_interpreted():
    forex = [QuoteFactory.forex("ARS=X", "[b]ARS[/b]")]

    text = _render(MarketSnapshot(forex=forex, equities=[]))

    assert "[b]ARS[/b]" in text


@pytest.mark.unit
def test_render_clears_screen_by_default(mocker):
    console = Console(file=io.StringIO())
    clear = mocker.patch.object(console, "clear")

    Dashboard(console=console).render(MarketSnapshot(forex=[], equities=[]))

    clear.assert_called_once()
