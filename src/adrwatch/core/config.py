"""Configuration management for adrwatch"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from adrwatch.domain.models import SymbolRequest
from adrwatch.shared.constants import (
    CHART_URL_TEMPLATE,
    DIAGNOSTIC_SYMBOLS,
    EQUITY_SYMBOLS,
    FOREIGN_MARKET,
    FOREX_SYMBOLS,
    OFFICIAL_RATE_MARKER,
    QUOTE_SUMMARY_URL_TEMPLATE,
    REQUEST_COOKIES,
    REQUEST_HEADERS,
)
from adrwatch.shared.exceptions import ConfigurationError

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class HttpConfig:
    """Parameters for the shared quote HTTP client"""

    # Per-request timeout (seconds)
    timeout_seconds: float = 15.0

    # Attempts per endpoint variant before giving up on it
    max_attempts: int = 3

    # Backoff before attempt i+1 is backoff_base_seconds * 2**i
    backoff_base_seconds: float = 1.0

    # Keep-alive pool size
    max_keepalive_connections: int = 10

    chart_url_template: str = CHART_URL_TEMPLATE
    quote_summary_url_template: str = QUOTE_SUMMARY_URL_TEMPLATE
    headers: dict[str, str] = field(default_factory=lambda: dict(REQUEST_HEADERS))
    cookies: dict[str, str] = field(default_factory=lambda: dict(REQUEST_COOKIES))


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
    if value < 1:
        raise ConfigurationError(f"{name} must be at least 1, got {value}")
    return value


@dataclass
class Config:
    """Configuration for adrwatch, optionally overridden from the environment"""

    http: HttpConfig = field(default_factory=HttpConfig)

    # Delay between successful cycles (seconds)
    refresh_interval_seconds: float = 5.0

    # Delay before retrying a cycle whose batch failed (seconds)
    error_backoff_seconds: float = 5.0

    forex_symbols: tuple[SymbolRequest, ...] = FOREX_SYMBOLS
    equity_symbols: tuple[SymbolRequest, ...] = EQUITY_SYMBOLS
    diagnostic_symbols: tuple[str, ...] = DIAGNOSTIC_SYMBOLS
    run_diagnostics: bool = True

    official_rate_marker: str = OFFICIAL_RATE_MARKER
    foreign_market: str = FOREIGN_MARKET

    log_level: str = "INFO"
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration, applying environment variable overrides

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If an override is present but invalid
        """
        http = HttpConfig(
            timeout_seconds=_env_float(
                "ADRWATCH_REQUEST_TIMEOUT", HttpConfig.timeout_seconds
            ),
            max_attempts=_env_int("ADRWATCH_MAX_ATTEMPTS", HttpConfig.max_attempts),
        )

        log_level = os.getenv("ADRWATCH_LOG_LEVEL", cls.log_level).upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"ADRWATCH_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}"
            )

        config = cls(
            http=http,
            refresh_interval_seconds=_env_float(
                "ADRWATCH_REFRESH_SECONDS", cls.refresh_interval_seconds
            ),
            error_backoff_seconds=_env_float(
                "ADRWATCH_ERROR_BACKOFF_SECONDS", cls.error_backoff_seconds
            ),
            run_diagnostics=os.getenv("ADRWATCH_SKIP_DIAGNOSTICS", "false").lower()
            != "true",
            log_level=log_level,
            log_dir=Path(os.getenv("ADRWATCH_LOG_DIR", str(cls.log_dir))),
        )

        logger.debug("Configuration loaded:")
        logger.debug(f"  Refresh Interval: {config.refresh_interval_seconds}s")
        logger.debug(f"  Error Backoff: {config.error_backoff_seconds}s")
        logger.debug(f"  Request Timeout: {config.http.timeout_seconds}s")
        logger.debug(f"  Max Attempts: {config.http.max_attempts}")
        logger.debug(
            f"  Symbols: {len(config.forex_symbols)} forex, "
            f"{len(config.equity_symbols)} equities"
        )

        return config
