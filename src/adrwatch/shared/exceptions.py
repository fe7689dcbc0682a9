"""Consolidated exceptions for adrwatch.

All custom exceptions are defined here to provide a single source of truth
for error handling across the application.
"""


class AdrWatchError(Exception):
    """Base exception for adrwatch errors"""

    pass


class QuoteFetchError(AdrWatchError):
    """Base exception for failures fetching a single symbol"""

    def __init__(self, symbol: str, message: str) -> None:
        self.symbol = symbol
        super().__init__(f"{symbol}: {message}")


class TransportError(QuoteFetchError):
    """Raised when no HTTP response could be obtained (retryable)"""

    pass


class ServerError(QuoteFetchError):
    """Raised when the upstream kept answering with a 5xx status (retryable)"""

    def __init__(self, symbol: str, status_code: int, attempts: int) -> None:
        self.status_code = status_code
        self.attempts = attempts
        super().__init__(
            symbol,
            f"after {attempts} attempts the last status code was {status_code}",
        )


class AuthRejectedError(QuoteFetchError):
    """Raised on a 401 response; triggers the switch to the fallback endpoint"""

    def __init__(self, symbol: str, status_code: int = 401) -> None:
        self.status_code = status_code
        super().__init__(symbol, f"request rejected with status {status_code}")


class UnexpectedStatusError(QuoteFetchError):
    """Raised on a terminal client-class status (not retried)"""

    def __init__(self, symbol: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(symbol, f"unexpected HTTP status code {status_code}")


class MalformedResponseError(QuoteFetchError):
    """Raised when a response body cannot be parsed"""

    pass


class NoDataError(QuoteFetchError):
    """Raised when the upstream returned an empty result list"""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol, "no data available")


class UpstreamDomainError(QuoteFetchError):
    """Raised when the upstream payload carries an explicit error"""

    def __init__(self, symbol: str, code: str, description: str) -> None:
        self.code = code
        self.description = description
        super().__init__(symbol, f"{code}: {description}")


class BatchUnavailableError(AdrWatchError):
    """Raised when a whole batch could not be aggregated"""

    pass


class ConfigurationError(AdrWatchError):
    """Raised when configuration is invalid or missing"""

    pass
