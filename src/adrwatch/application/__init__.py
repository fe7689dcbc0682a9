"""Application layer: aggregation, conversion and the refresh loop"""

from .aggregator import aggregate, quote_fetcher, unique_requests
from .conversion import convert, select_official_rate
from .scheduler import RefreshScheduler, SchedulerState, SnapshotRenderer

__all__ = [
    "RefreshScheduler",
    "SchedulerState",
    "SnapshotRenderer",
    "aggregate",
    "convert",
    "quote_fetcher",
    "select_official_rate",
    "unique_requests",
]
