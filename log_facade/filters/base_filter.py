"""
Base filter interface
"""

from abc import ABC, abstractmethod
from typing import Optional

from log_facade.core.filter_result import FilterResult
from log_facade.core.log_level import LogLevel
from log_facade.core.marker import Marker


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    A filter looks at a candidate log call before any record exists and
    answers ACCEPT, DENY or NEUTRAL. Filters that test a condition report
    ``when_matched`` if it holds and ``when_differ`` otherwise.

    Filters may keep internal state but must be safe to call from several
    threads at once, and must never log.
    """

    def __init__(
        self,
        when_matched: FilterResult = FilterResult.NEUTRAL,
        when_differ: FilterResult = FilterResult.DENY,
    ):
        if not isinstance(when_matched, FilterResult) or not isinstance(when_differ, FilterResult):
            raise TypeError("when_matched and when_differ must be FilterResult values")
        self.when_matched = when_matched
        self.when_differ = when_differ

    @abstractmethod
    def evaluate(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        """
        Decide on a candidate log call.

        Args:
            logger_name: Name of the logger making the call
            level: Level of the call
            marker: Marker of the call, None if absent
            throwable: Exception of the call, None if absent

        Returns:
            FilterResult for this call
        """
        pass

    def check(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        """
        Answer like ``evaluate`` without recording the call.

        Used by ``is_loggable`` guards. Stateless filters need not
        override it; filters that count calls must.
        """
        return self.evaluate(logger_name, level, marker, throwable)

    def result(self, matched: bool) -> FilterResult:
        """Map a match outcome to this filter's configured result."""
        return self.when_matched if matched else self.when_differ

    def __call__(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        """Allow filters to be callable."""
        return self.evaluate(logger_name, level, marker, throwable)
