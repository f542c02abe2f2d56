"""
Marker-based filter
"""

from typing import Optional

from log_facade.core.filter_result import FilterResult
from log_facade.core.log_level import LogLevel
from log_facade.core.marker import Marker
from log_facade.filters.base_filter import BaseFilter


class MarkerFilter(BaseFilter):
    """
    Filter log calls by marker.

    Matches when this filter's marker is, or directly references, the
    call's marker. A call without a marker never matches.

    Example:
        security = get_marker("SECURITY")
        security.add(get_marker("AUDIT"))

        # Calls tagged SECURITY or AUDIT go through, everything else is denied
        filter = MarkerFilter(security, when_matched=FilterResult.ACCEPT)
    """

    def __init__(
        self,
        marker: Marker,
        when_matched: FilterResult = FilterResult.NEUTRAL,
        when_differ: FilterResult = FilterResult.DENY,
    ):
        super().__init__(when_matched, when_differ)
        if not isinstance(marker, Marker):
            raise TypeError("marker must be a Marker")
        self.marker = marker

    def evaluate(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        return self.result(marker is not None and self.marker.is_or_contains(marker))

    def __repr__(self) -> str:
        return f"MarkerFilter(marker={self.marker})"
