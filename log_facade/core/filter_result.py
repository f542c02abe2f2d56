"""
Filter decision values and the ordered-chain combination rule
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional

from log_facade.core.log_level import LogLevel

if TYPE_CHECKING:
    from log_facade.core.marker import Marker
    from log_facade.filters.base_filter import BaseFilter


class FilterResult(Enum):
    """
    Tri-state decision returned by a filter.

    ACCEPT and DENY end chain evaluation. NEUTRAL defers to the next
    filter, or to the handler's level threshold when no filter is left.
    """

    ACCEPT = "accept"
    DENY = "deny"
    NEUTRAL = "neutral"

    @property
    def is_decisive(self) -> bool:
        return self is not FilterResult.NEUTRAL

    def __str__(self) -> str:
        return self.name


def evaluate_chain(
    filters: Iterable["BaseFilter"],
    logger_name: str,
    level: LogLevel,
    marker: Optional["Marker"] = None,
    throwable: Optional[BaseException] = None,
    commit: bool = True,
) -> FilterResult:
    """
    Evaluate filters in order and return the first decisive result.

    Args:
        filters: Filters in attachment order
        logger_name: Name of the logger making the call
        level: Level of the call
        marker: Optional marker of the call
        throwable: Optional exception attached to the call
        commit: If False, ask each filter's ``check`` instead of
            ``evaluate`` so stateful filters answer without counting
            the call

    Returns:
        The first ACCEPT or DENY produced, or NEUTRAL if every filter
        was neutral (an empty chain is neutral too)
    """
    for log_filter in filters:
        if commit:
            result = log_filter.evaluate(logger_name, level, marker, throwable)
        else:
            check = getattr(log_filter, "check", log_filter.evaluate)
            result = check(logger_name, level, marker, throwable)
        if result.is_decisive:
            return result
    return FilterResult.NEUTRAL
