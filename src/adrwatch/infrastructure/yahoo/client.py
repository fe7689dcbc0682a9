"""YahooQuoteClient - one logical quote lookup with endpoint fallback"""

import asyncio

import httpx
from loguru import logger

from adrwatch.core.config import HttpConfig
from adrwatch.domain.models import Quote
from adrwatch.shared.exceptions import (
    AuthRejectedError,
    ServerError,
    TransportError,
)

from .normalizer import normalize
from .requests import QuoteRequestClient, Sleep
from .schemas import SourceVariant

# Failures on the primary endpoint that make the fallback worth trying
_FALLBACK_ERRORS = (AuthRejectedError, ServerError, TransportError)


class YahooQuoteClient:
    """Fetch canonical quotes from Yahoo Finance

    The v8 chart endpoint is tried first. When it is unusable (retries
    exhausted or a 401) the v10 quote summary endpoint is tried once.
    """

    PRIMARY = SourceVariant.CHART
    FALLBACK = SourceVariant.QUOTE_SUMMARY

    def __init__(self, request_client: QuoteRequestClient, config: HttpConfig) -> None:
        self._request_client = request_client
        self._url_templates = {
            SourceVariant.CHART: config.chart_url_template,
            SourceVariant.QUOTE_SUMMARY: config.quote_summary_url_template,
        }

    def url_for(self, variant: SourceVariant, symbol: str) -> str:
        return self._url_templates[variant].format(symbol=symbol)

    async def _fetch_variant(self, symbol: str, variant: SourceVariant) -> Quote:
        response = await self._request_client.get(self.url_for(variant, symbol), symbol)
        return normalize(response.content, variant, symbol)

    async def fetch_quote(self, symbol: str) -> Quote:
        """Fetch one quote, falling back to the alternate endpoint once

        Args:
            symbol: Upstream ticker symbol

        Returns:
            Canonical Quote

        Raises:
            QuoteFetchError: Subclass describing why the symbol failed
        """
        logger.debug(f"Fetching quote for {symbol}...")
        try:
            return await self._fetch_variant(symbol, self.PRIMARY)
        except _FALLBACK_ERRORS as e:
            logger.info(
                f"{self.PRIMARY.value} unusable for {symbol} ({e}); "
                f"trying {self.FALLBACK.value}"
            )

        return await self._fetch_variant(symbol, self.FALLBACK)

    async def aclose(self) -> None:
        await self._request_client.aclose()


def create_quote_client(
    config: HttpConfig,
    transport: httpx.AsyncBaseTransport | None = None,
    sleep: Sleep | None = None,
) -> YahooQuoteClient:
    """Build a YahooQuoteClient with its request client

    Args:
        config: HTTP parameters
        transport: Optional httpx transport override
        sleep: Optional backoff awaitable override

    Returns:
        Ready-to-use YahooQuoteClient
    """
    request_client = QuoteRequestClient(
        config, transport=transport, sleep=sleep or asyncio.sleep
    )
    return YahooQuoteClient(request_client, config)
