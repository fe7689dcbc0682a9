"""Normalize Yahoo Finance response bodies into canonical quotes"""

from loguru import logger
from pydantic import ValidationError

from adrwatch.domain.models import Quote
from adrwatch.shared.exceptions import (
    MalformedResponseError,
    NoDataError,
    UpstreamDomainError,
)

from .schemas import (
    ENVELOPES,
    ChartEnvelope,
    ParsedQuote,
    QuoteSummaryEnvelope,
    SourceVariant,
    UpstreamErrorPayload,
)


def parse_payload(body: bytes | str, variant: SourceVariant, symbol: str) -> ParsedQuote:
    """Parse a raw response body into the envelope for its variant

    Args:
        body: Raw JSON response body
        variant: Endpoint variant the body came from
        symbol: Requested symbol, for error reporting

    Returns:
        ChartEnvelope or QuoteSummaryEnvelope

    Raises:
        MalformedResponseError: If the body is not valid JSON for the variant
    """
    try:
        return ENVELOPES[variant].model_validate_json(body)
    except ValidationError as e:
        logger.debug(f"Invalid {variant.value} payload for {symbol}: {e}")
        raise MalformedResponseError(
            symbol, f"could not decode {variant.value} response: {e.error_count()} errors"
        ) from e


def resolve_name(short_name: str | None, long_name: str | None, symbol: str) -> str:
    """Prefer the short name, then the long name, then the symbol itself"""
    return short_name or long_name or symbol


def _raise_for_upstream_error(symbol: str, error: UpstreamErrorPayload | None) -> None:
    if error is None:
        return
    logger.warning(
        f"Upstream error for {symbol}: {error.code} - {error.description}"
    )
    raise UpstreamDomainError(symbol, error.code or "", error.description or "")


def _from_chart(envelope: ChartEnvelope, symbol: str) -> Quote:
    chart = envelope.chart
    _raise_for_upstream_error(symbol, chart.error)
    if not chart.result:
        raise NoDataError(symbol)

    meta = chart.result[0].meta
    previous_close = meta.previous_close
    if previous_close is None:
        previous_close = meta.chart_previous_close

    return Quote(
        symbol=symbol,
        display_name=resolve_name(meta.short_name, meta.long_name, symbol),
        price=meta.regular_market_price or 0.0,
        previous_close=previous_close or 0.0,
        volume=meta.regular_market_volume or 0,
    )


def _from_quote_summary(envelope: QuoteSummaryEnvelope, symbol: str) -> Quote:
    summary = envelope.quote_summary
    _raise_for_upstream_error(symbol, summary.error)
    if not summary.result:
        raise NoDataError(symbol)

    price = summary.result[0].price
    return Quote(
        symbol=symbol,
        display_name=resolve_name(price.short_name, price.long_name, symbol),
        price=price.regular_market_price.raw or 0.0,
        previous_close=price.regular_market_previous_close.raw or 0.0,
        volume=price.regular_market_volume.raw or 0,
    )


def to_quote(parsed: ParsedQuote, symbol: str) -> Quote:
    """Map either parsed envelope onto a canonical Quote

    Raises:
        UpstreamDomainError: If the payload carries an explicit error
        NoDataError: If the result list is empty
    """
    if isinstance(parsed, ChartEnvelope):
        return _from_chart(parsed, symbol)
    if isinstance(parsed, QuoteSummaryEnvelope):
        return _from_quote_summary(parsed, symbol)
    raise TypeError(f"Unsupported payload type: {type(parsed).__name__}")


def normalize(body: bytes | str, variant: SourceVariant, symbol: str) -> Quote:
    """Parse a response body of either variant into a canonical Quote

    Args:
        body: Raw JSON response body
        variant: Endpoint variant the body came from
        symbol: Requested symbol

    Returns:
        Canonical Quote

    Raises:
        MalformedResponseError: If the body cannot be parsed
        UpstreamDomainError: If the upstream reported an error
        NoDataError: If the upstream returned no results
    """
    quote = to_quote(parse_payload(body, variant, symbol), symbol)
    logger.debug(
        f"Parsed {symbol} ({variant.value}): price={quote.price} "
        f"previous_close={quote.previous_close} name={quote.display_name}"
    )
    return quote
