"""Pytest fixtures for adrwatch tests"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

import httpx
import pytest

# =============================================================================
# Global Test Setup
# =============================================================================

# Add src to Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from adrwatch.core.config import Config, HttpConfig  # noqa: E402
from adrwatch.infrastructure.yahoo.client import YahooQuoteClient  # noqa: E402
from adrwatch.infrastructure.yahoo.requests import (  # noqa: E402
    QuoteRequestClient,
)


@pytest.fixture
def http_config() -> HttpConfig:
    """Default HTTP parameters (3 attempts, 1s backoff base)"""
    return HttpConfig()


@pytest.fixture
def fast_config() -> Config:
    """Config with no waits and no startup diagnostics"""
    return Config(
        refresh_interval_seconds=0,
        error_backoff_seconds=0,
        run_diagnostics=False,
    )


@pytest.fixture
def sleep_mock() -> AsyncMock:
    """Stand-in for asyncio.sleep that records backoff delays"""
    return AsyncMock()


@pytest.fixture
def make_quote_client(http_config, sleep_mock):
    """Build a YahooQuoteClient around an httpx.MockTransport handler"""

    def _make(handler) -> YahooQuoteClient:
        request_client = QuoteRequestClient(
            http_config,
            transport=httpx.MockTransport(handler),
            sleep=sleep_mock,
        )
        return YahooQuoteClient(request_client, http_config)

    return _make
