"""Tests for quote domain models"""

from dataclasses import FrozenInstanceError

import pytest

from adrwatch.domain.models import (
    EquityQuote,
    ForexQuote,
    QuoteCategory,
    RateContext,
    SymbolRequest,
    compute_change,
    derive_quote,
)
from tests.factories import QuoteFactory


@pytest.mark.unit
class TestComputeChange:
    def test_change_is_price_minus_previous_close(self):
        change, _ = compute_change(1000.0, 950.0)

        assert change == 50.0

    def test_change_percent_relative_to_previous_close(self):
        _, change_percent = compute_change(1000.0, 950.0)

        assert change_percent == pytest.approx(5.263, abs=1e-3)

    def test_zero_previous_close_gives_zero_percent(self):
        change, change_percent = compute_change(12.5, 0.0)

        assert change == 12.5
        assert change_percent == 0.0

    def test_negative_change(self):
        change, change_percent = compute_change(90.0, 100.0)

        assert change == -10.0
        assert change_percent == pytest.approx(-10.0)


@pytest.mark.unit
class TestDerivedQuotes:
    def test_forex_uses_configured_display_name(self):
        request = QuoteFactory.forex_request("ARS=X", "Dólar Oficial")
        quote = QuoteFactory.quote("ARS=X", 1000.0, 950.0, display_name="USD/ARS")

        forex = ForexQuote.from_quote(request, quote)

        assert forex.display_name == "Dólar Oficial"
        assert forex.change == 50.0
        assert forex.change_percent == pytest.approx(5.263, abs=1e-3)

    def test_equity_uses_upstream_name_and_market(self):
        request = QuoteFactory.equity_request("YPF", "NYSE")
        quote = QuoteFactory.quote("YPF", 100.0, 90.0, volume=42)

        equity = EquityQuote.from_quote(request, quote)

        assert equity.display_name == "YPF Sociedad Anonima"
        assert equity.market == "NYSE"
        assert equity.volume == 42
        assert equity.converted is False
        assert equity.change == 10.0

    def test_derive_quote_dispatches_on_category(self):
        quote = QuoteFactory.quote()

        forex = derive_quote(QuoteFactory.forex_request(), quote)
        equity = derive_quote(QuoteFactory.equity_request(), quote)

        assert isinstance(forex, ForexQuote)
        assert isinstance(equity, EquityQuote)

    def test_converted_at_scales_price_and_change_only(self):
        equity = QuoteFactory.equity(price=100.0, previous_close=90.0)

        converted = equity.converted_at(1000.0)

        assert converted.price == 100_000.0
        assert converted.change == 10_000.0
        assert converted.previous_close == 90.0
        assert converted.change_percent == equity.change_percent
        assert converted.converted is True
        assert equity.converted is False

    def test_quotes_are_immutable(self):
        equity = QuoteFactory.equity()

        with pytest.raises(FrozenInstanceError):
            equity.price = 1.0  # type: ignore[misc]


@pytest.mark.unit
def test_symbol_request_market_defaults_to_none():
    request = SymbolRequest("EURUSD=X", "Euro/USD", QuoteCategory.FOREX)

    assert request.market is None


@pytest.mark.unit
def test_rate_context_availability():
    assert RateContext().is_available is False
    assert RateContext(rate=1000.0, source_symbol="ARS=X").is_available is True
