"""Shared constants and exceptions."""

from .exceptions import (
    AdrWatchError,
    AuthRejectedError,
    BatchUnavailableError,
    ConfigurationError,
    MalformedResponseError,
    NoDataError,
    QuoteFetchError,
    ServerError,
    TransportError,
    UnexpectedStatusError,
    UpstreamDomainError,
)

__all__ = [
    "AdrWatchError",
    "AuthRejectedError",
    "BatchUnavailableError",
    "ConfigurationError",
    "MalformedResponseError",
    "NoDataError",
    "QuoteFetchError",
    "ServerError",
    "TransportError",
    "UnexpectedStatusError",
    "UpstreamDomainError",
]
