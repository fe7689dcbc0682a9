"""QuoteRequestClient - HTTP GET with retry logic"""

import asyncio
from collections.abc import Awaitable, Callable

import httpx
from loguru import logger

from adrwatch.core.config import HttpConfig
from adrwatch.core.logging_setup import install_logging_bridge
from adrwatch.shared.exceptions import (
    AuthRejectedError,
    ServerError,
    TransportError,
    UnexpectedStatusError,
)

Sleep = Callable[[float], Awaitable[None]]


class QuoteRequestClient:
    """Low-level HTTP client for quote requests

    Responsibilities:
    - Shared, connection-pooled httpx client
    - Browser-like headers and cookie on every request
    - Retry with exponential backoff
    - Status classification into the error hierarchy
    """

    def __init__(
        self,
        config: HttpConfig,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        """Initialize request client

        Args:
            config: HTTP parameters (timeout, attempts, headers, cookie)
            transport: Optional transport override (tests use httpx.MockTransport)
            sleep: Awaitable used for backoff waits
        """
        self._config = config
        self._transport = transport
        self._sleep = sleep
        self._http_client: httpx.AsyncClient | None = None
        install_logging_bridge()

    def _build_http_client(self) -> httpx.AsyncClient:
        """Create an AsyncClient with request/response logging hooks."""
        return httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            follow_redirects=True,
            transport=self._transport,
            headers=self._config.headers,
            cookies=self._config.cookies,
            limits=httpx.Limits(
                max_keepalive_connections=self._config.max_keepalive_connections
            ),
            event_hooks={
                "request": [self._log_httpx_request],
                "response": [self._log_httpx_response],
            },
        )

    async def _log_httpx_request(self, request: httpx.Request) -> None:
        logger.debug(f"HTTPX request: {request.method} {request.url}")

    async def _log_httpx_response(self, response: httpx.Response) -> None:
        logger.debug(
            f"HTTPX response: status={response.status_code} url={response.url}"
        )

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Shared client, created on first use and reused across requests"""
        if self._http_client is None:
            self._http_client = self._build_http_client()
        return self._http_client

    async def aclose(self) -> None:
        """Close the shared client and release pooled connections"""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def backoff_delay(self, attempt: int) -> float:
        """Delay after a failed attempt (0-based): base * 2**attempt"""
        return self._config.backoff_base_seconds * (2**attempt)

    async def _backoff(self, attempt: int) -> None:
        delay = self.backoff_delay(attempt)
        logger.info(f"Waiting {delay:.0f}s before the next attempt...")
        await self._sleep(delay)

    async def get(self, url: str, symbol: str) -> httpx.Response:
        """GET ``url`` with exponential backoff retry logic

        Retry Strategy:
        - Up to ``max_attempts`` attempts
        - Backoff after attempt i (0-based): base * 2**i, i.e. 1s, 2s, 4s
        - Retry on: network errors, 5xx
        - Don't retry: any other status, returned or raised immediately
        - Special: 401 -> AuthRejectedError so the caller can switch endpoint

        Args:
            url: Fully formatted request URL
            symbol: Symbol being fetched, for logs and errors

        Returns:
            The 200 response

        Raises:
            AuthRejectedError: On a 401 response
            UnexpectedStatusError: On any other non-retryable, non-200 status
            ServerError: If attempts ran out and a response was received
            TransportError: If attempts ran out without any response
        """
        max_attempts = self._config.max_attempts
        last_error: httpx.HTTPError | None = None
        last_status: int | None = None

        for attempt in range(max_attempts):
            if attempt > 0:
                logger.info(
                    f"Retry {attempt + 1}/{max_attempts} for {symbol}: {url}"
                )

            try:
                response = await self.http_client.get(url)
            except httpx.TransportError as e:
                logger.warning(f"HTTP request for {symbol} failed: {e!r}")
                last_error = e
                await self._backoff(attempt)
                continue

            status = response.status_code
            logger.debug(f"Response for {symbol}: status {status}")

            if status == 200:
                return response

            if status == 401:
                logger.warning(f"Unauthorized response for {symbol} ({url})")
                raise AuthRejectedError(symbol, status)

            if status < 500:
                logger.error(f"Client error {status} for {symbol}")
                raise UnexpectedStatusError(symbol, status)

            logger.warning(f"Server error {status} for {symbol}, retrying")
            last_status = status
            await self._backoff(attempt)

        if last_status is not None:
            raise ServerError(symbol, last_status, max_attempts)

        raise TransportError(
            symbol,
            f"no response after {max_attempts} attempts: {last_error!r}",
        ) from last_error
