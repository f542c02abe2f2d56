"""
Level-based filter

Filters log calls based on log level range
"""

from typing import Optional

from log_facade.core.filter_result import FilterResult
from log_facade.core.log_level import LogLevel
from log_facade.core.marker import Marker
from log_facade.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter log calls based on log level.

    Matches by minimum and/or maximum log level.
    """

    def __init__(
        self,
        min_level: Optional[LogLevel] = None,
        max_level: Optional[LogLevel] = None,
        when_matched: FilterResult = FilterResult.NEUTRAL,
        when_differ: FilterResult = FilterResult.DENY,
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum log level (inclusive). If None, no minimum.
            max_level: Maximum log level (inclusive). If None, no maximum.
            when_matched: Result when the level is in range
            when_differ: Result when the level is out of range

        Example:
            # Deny anything below WARN
            filter = LevelFilter(min_level=LogLevel.WARN)

            # Accept DEBUG to INFO outright, defer on everything else
            filter = LevelFilter(
                min_level=LogLevel.DEBUG,
                max_level=LogLevel.INFO,
                when_matched=FilterResult.ACCEPT,
                when_differ=FilterResult.NEUTRAL,
            )
        """
        super().__init__(when_matched, when_differ)
        if min_level is not None and max_level is not None and min_level > max_level:
            raise ValueError("min_level cannot exceed max_level")
        self.min_level = min_level
        self.max_level = max_level

    def evaluate(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        """
        Check if the call's level is within the specified range.

        Returns:
            when_matched if in range, when_differ otherwise
        """
        if self.min_level is not None and level < self.min_level:
            return self.when_differ

        if self.max_level is not None and level > self.max_level:
            return self.when_differ

        return self.when_matched

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level}, max={self.max_level})"
