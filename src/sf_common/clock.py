"""Millisecond wall-clock source for id generation.

IdWorker takes any zero-arg callable returning epoch milliseconds, so tests
can swap in a scripted clock.
"""

import time
from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], int]


def system_clock_ms() -> int:
    """Current Unix time in whole milliseconds, read fresh on every call."""
    return time.time_ns() // 1_000_000


def ms_to_datetime(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to a timezone-aware UTC datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)
