"""Filters that always give the same answer"""

from typing import Optional

from log_facade.core.filter_result import FilterResult
from log_facade.core.log_level import LogLevel
from log_facade.core.marker import Marker
from log_facade.filters.base_filter import BaseFilter


class ConstantFilter(BaseFilter):
    """Return a fixed result for every call."""

    def __init__(self, result: FilterResult):
        super().__init__(result, result)
        self.constant = result

    def evaluate(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        return self.constant

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AlwaysAcceptFilter(ConstantFilter):
    def __init__(self):
        super().__init__(FilterResult.ACCEPT)


class AlwaysDenyFilter(ConstantFilter):
    def __init__(self):
        super().__init__(FilterResult.DENY)


class AlwaysNeutralFilter(ConstantFilter):
    def __init__(self):
        super().__init__(FilterResult.NEUTRAL)
