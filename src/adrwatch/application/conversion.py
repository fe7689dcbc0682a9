"""Official rate selection and local-currency conversion"""

from collections.abc import Iterable

from loguru import logger

from adrwatch.domain.models import EquityQuote, ForexQuote, RateContext


def select_official_rate(forex: Iterable[ForexQuote], marker: str) -> RateContext:
    """Pick the official rate from an aggregated forex batch

    Args:
        forex: Aggregated forex quotes
        marker: Text identifying the official rate in a display name

    Returns:
        RateContext for the first matching quote, or an unavailable
        context (rate 0.0) when nothing matches
    """
    for quote in forex:
        if marker in quote.display_name:
            logger.info(f"Official rate ({quote.symbol}): {quote.price:.2f}")
            return RateContext(rate=quote.price, source_symbol=quote.symbol)

    logger.warning(f"Could not obtain the official rate ({marker})")
    return RateContext()


def convert(
    equities: Iterable[EquityQuote], rate: float, foreign_market: str
) -> list[EquityQuote]:
    """Express foreign-market equity prices in the local currency

    Price and change are multiplied by ``rate``. The percent change keeps
    the value computed from the unconverted figures.

    Args:
        equities: Aggregated equity quotes
        rate: Official exchange rate, 0.0 when unavailable
        foreign_market: Market whose listings are converted

    Returns:
        New list of quotes; unchanged when the rate is 0
    """
    if rate == 0:
        return list(equities)

    return [
        quote.converted_at(rate) if quote.market == foreign_market else quote
        for quote in equities
    ]
