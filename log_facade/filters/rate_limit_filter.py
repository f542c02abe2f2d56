"""
Sliding-window rate limiting filter

Tracks one bucket per logger name and level.
"""

from __future__ import annotations
from collections import defaultdict, deque
from datetime import timedelta
from typing import Callable, Deque, Dict, Optional, Tuple, Union
import threading
import time

from log_facade.core.filter_result import FilterResult
from log_facade.core.log_level import LogLevel
from log_facade.core.marker import Marker
from log_facade.filters.base_filter import BaseFilter


class RateLimitFilter(BaseFilter):
    """
    Limit calls per logger/level combination within a time window.

    Calls within quota report ``when_matched`` (NEUTRAL by default) and
    are counted against the quota. Calls over quota report
    ``when_differ`` (DENY by default) and are not counted.

    Thread Safety:
        Bucket updates are serialized with a lock.

    Example:
        # At most 10 messages per logger and level every second
        filter = RateLimitFilter(max_events=10, interval=1.0)
    """

    def __init__(
        self,
        max_events: int,
        interval: Union[float, timedelta],
        clock: Callable[[], float] = time.monotonic,
        when_matched: FilterResult = FilterResult.NEUTRAL,
        when_differ: FilterResult = FilterResult.DENY,
    ):
        super().__init__(when_matched, when_differ)
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        if max_events <= 0:
            raise ValueError("max_events must be positive")
        if interval <= 0:
            raise ValueError("interval must be positive")

        self.max_events = max_events
        self.interval = float(interval)
        self._clock = clock
        self._buckets: Dict[Tuple[str, LogLevel], Deque[float]] = defaultdict(deque)
        self._lock = threading.Lock()
        self.denied_count = 0

    def evaluate(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        """Return when_matched while the bucket has room, when_differ otherwise."""
        now = self._clock()
        cutoff = now - self.interval
        with self._lock:
            bucket = self._buckets[(logger_name, level)]
            while bucket and bucket[0] <= cutoff:
                bucket.popleft()
            if len(bucket) >= self.max_events:
                self.denied_count += 1
                return self.when_differ
            bucket.append(now)
            return self.when_matched

    def check(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        """Report what ``evaluate`` would answer, leaving the quota untouched."""
        cutoff = self._clock() - self.interval
        with self._lock:
            bucket = self._buckets.get((logger_name, level), ())
            used = sum(1 for stamp in bucket if stamp > cutoff)
        return self.when_differ if used >= self.max_events else self.when_matched

    def reset(self) -> None:
        """Forget all counted calls."""
        with self._lock:
            self._buckets.clear()
            self.denied_count = 0

    def __repr__(self) -> str:
        return f"RateLimitFilter(max_events={self.max_events}, interval={self.interval})"
