"""Pydantic models for the two Yahoo Finance response shapes

The chart endpoint (v8) returns a flat ``meta`` block, while the quote
summary endpoint (v10) nests each numeric field in a ``{"raw": value}``
envelope. Both are parsed into one of the envelopes below and handed to the
normalizer as a tagged union.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SourceVariant(Enum):
    """Upstream endpoint variant a response body came from"""

    CHART = "v8-chart"
    QUOTE_SUMMARY = "v10-quote-summary"


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class UpstreamErrorPayload(_UpstreamModel):
    """Explicit error block reported by the upstream"""

    code: str | None = None
    description: str | None = None


# v8 chart shape


class ChartMeta(_UpstreamModel):
    regular_market_price: float | None = Field(None, alias="regularMarketPrice")
    previous_close: float | None = Field(None, alias="previousClose")
    chart_previous_close: float | None = Field(None, alias="chartPreviousClose")
    regular_market_volume: int | None = Field(None, alias="regularMarketVolume")
    exchange_name: str | None = Field(None, alias="exchangeName")
    instrument_type: str | None = Field(None, alias="instrumentType")
    short_name: str | None = Field(None, alias="shortName")
    long_name: str | None = Field(None, alias="longName")


class ChartResult(_UpstreamModel):
    meta: ChartMeta


class ChartBody(_UpstreamModel):
    result: list[ChartResult] | None = None
    error: UpstreamErrorPayload | None = None


class ChartEnvelope(_UpstreamModel):
    """Top-level v8 chart response"""

    chart: ChartBody


# v10 quote summary shape


class RawFloat(_UpstreamModel):
    raw: float | None = None


class RawInt(_UpstreamModel):
    raw: int | None = None


class PriceModule(_UpstreamModel):
    regular_market_price: RawFloat = Field(
        default_factory=RawFloat, alias="regularMarketPrice"
    )
    regular_market_previous_close: RawFloat = Field(
        default_factory=RawFloat, alias="regularMarketPreviousClose"
    )
    regular_market_volume: RawInt = Field(
        default_factory=RawInt, alias="regularMarketVolume"
    )
    short_name: str | None = Field(None, alias="shortName")
    long_name: str | None = Field(None, alias="longName")


class QuoteSummaryResult(_UpstreamModel):
    price: PriceModule


class QuoteSummaryBody(_UpstreamModel):
    result: list[QuoteSummaryResult] | None = None
    error: UpstreamErrorPayload | None = None


class QuoteSummaryEnvelope(_UpstreamModel):
    """Top-level v10 quote summary response"""

    quote_summary: QuoteSummaryBody = Field(alias="quoteSummary")


ParsedQuote = ChartEnvelope | QuoteSummaryEnvelope

ENVELOPES: dict[SourceVariant, type[ChartEnvelope] | type[QuoteSummaryEnvelope]] = {
    SourceVariant.CHART: ChartEnvelope,
    SourceVariant.QUOTE_SUMMARY: QuoteSummaryEnvelope,
}
