"""
Log filters module

Provides various filter implementations for controlling which log calls
a handler emits.
"""

from log_facade.filters.base_filter import BaseFilter
from log_facade.filters.constant_filters import (
    ConstantFilter,
    AlwaysAcceptFilter,
    AlwaysDenyFilter,
    AlwaysNeutralFilter,
)
from log_facade.filters.level_filter import LevelFilter
from log_facade.filters.marker_filter import MarkerFilter
from log_facade.filters.logger_name_filter import LoggerNameFilter
from log_facade.filters.throwable_filter import ThrowableFilter
from log_facade.filters.callback_filter import CallbackFilter
from log_facade.filters.rate_limit_filter import RateLimitFilter
from log_facade.filters.compound_filter import CompoundFilter

__all__ = [
    "BaseFilter",
    "ConstantFilter",
    "AlwaysAcceptFilter",
    "AlwaysDenyFilter",
    "AlwaysNeutralFilter",
    "LevelFilter",
    "MarkerFilter",
    "LoggerNameFilter",
    "ThrowableFilter",
    "CallbackFilter",
    "RateLimitFilter",
    "CompoundFilter",
]
