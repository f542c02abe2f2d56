"""
Pattern-based filter on logger names using regular expressions
"""

import re
from typing import Optional, Pattern, Union

from log_facade.core.filter_result import FilterResult
from log_facade.core.log_level import LogLevel
from log_facade.core.marker import Marker
from log_facade.filters.base_filter import BaseFilter


class LoggerNameFilter(BaseFilter):
    """
    Filter log calls based on regex matching of the logger name.

    Matching names report ``when_matched``, the rest ``when_differ``.
    """

    def __init__(
        self,
        pattern: Union[str, Pattern],
        case_sensitive: bool = True,
        when_matched: FilterResult = FilterResult.NEUTRAL,
        when_differ: FilterResult = FilterResult.DENY,
    ):
        """
        Initialize logger name filter.

        Args:
            pattern: Regular expression pattern (string or compiled Pattern)
            case_sensitive: Whether pattern matching is case-sensitive
            when_matched: Result for matching logger names
            when_differ: Result for the other names

        Example:
            # Only loggers under "svc"
            filter = LoggerNameFilter(r"^svc\\.")

            # Silence a noisy subsystem, defer on the rest
            filter = LoggerNameFilter(
                r"\\.http$",
                when_matched=FilterResult.DENY,
                when_differ=FilterResult.NEUTRAL,
            )
        """
        super().__init__(when_matched, when_differ)
        if isinstance(pattern, str):
            flags = 0 if case_sensitive else re.IGNORECASE
            self.pattern = re.compile(pattern, flags)
        else:
            self.pattern = pattern

    @classmethod
    def for_prefix(
        cls,
        prefix: str,
        when_matched: FilterResult = FilterResult.NEUTRAL,
        when_differ: FilterResult = FilterResult.DENY,
    ) -> "LoggerNameFilter":
        """
        Match a dotted logger name and all of its descendants.

        ``for_prefix("svc.auth")`` matches ``svc.auth`` and
        ``svc.auth.tokens`` but not ``svc.authz``.
        """
        return cls(
            rf"^{re.escape(prefix)}(\.|$)",
            when_matched=when_matched,
            when_differ=when_differ,
        )

    def evaluate(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        return self.result(self.pattern.search(logger_name) is not None)

    def __repr__(self) -> str:
        """String representation."""
        return f"LoggerNameFilter(pattern='{self.pattern.pattern}')"
