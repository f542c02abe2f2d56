"""
Compound filter - an ordered chain packaged as a single filter
"""

from __future__ import annotations
import threading
from typing import Optional, Tuple

from log_facade.core.filter_result import FilterResult, evaluate_chain
from log_facade.core.log_level import LogLevel
from log_facade.core.marker import Marker
from log_facade.filters.base_filter import BaseFilter


class CompoundFilter(BaseFilter):
    """
    Evaluate several filters in order; the first decisive result wins.

    Returns NEUTRAL if no member is decisive, so a compound filter can sit
    anywhere in a handler's chain. Members may be added and removed while
    other threads evaluate; each evaluation sees one consistent member list.

    Example:
        noisy = CompoundFilter(
            LoggerNameFilter.for_prefix("svc.http", when_differ=FilterResult.NEUTRAL),
            RateLimitFilter(max_events=5, interval=1.0),
        )
    """

    def __init__(self, *filters: BaseFilter):
        super().__init__()
        for log_filter in filters:
            _check_filter(log_filter)
        self._filters: Tuple[BaseFilter, ...] = tuple(filters)
        self._lock = threading.Lock()

    @property
    def filters(self) -> Tuple[BaseFilter, ...]:
        return self._filters

    def add(self, log_filter: BaseFilter) -> bool:
        """Append a filter; return False if it is already a member."""
        _check_filter(log_filter)
        with self._lock:
            if log_filter in self._filters:
                return False
            self._filters = self._filters + (log_filter,)
            return True

    def remove(self, log_filter: BaseFilter) -> bool:
        with self._lock:
            if log_filter not in self._filters:
                return False
            self._filters = tuple(f for f in self._filters if f is not log_filter)
            return True

    def clear(self) -> None:
        with self._lock:
            self._filters = ()

    def evaluate(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        return evaluate_chain(self._filters, logger_name, level, marker, throwable)

    def check(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        return evaluate_chain(
            self._filters, logger_name, level, marker, throwable, commit=False
        )

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        return f"CompoundFilter({', '.join(repr(f) for f in self._filters)})"


def _check_filter(log_filter) -> None:
    if not callable(getattr(log_filter, "evaluate", None)):
        raise TypeError(f"not a filter: {log_filter!r}")
