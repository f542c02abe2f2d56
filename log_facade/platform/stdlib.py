"""
Python standard library logging levels
"""

import logging

from log_facade.core.log_level import LogLevel
from log_facade.platform.level_mapper import LevelMapper

# logging has no TRACE; this is the value most libraries register
TRACE_LEVEL_NUM = 5

STDLIB_LEVEL_MAPPER: LevelMapper[int] = LevelMapper(
    {
        LogLevel.TRACE: TRACE_LEVEL_NUM,
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARN: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    },
    platform="stdlib",
)


def to_stdlib_level(level: LogLevel) -> int:
    return STDLIB_LEVEL_MAPPER.to_native_level(level)


def from_stdlib_level(native: int) -> LogLevel:
    return STDLIB_LEVEL_MAPPER.from_native_level(native)


def register_trace_level() -> None:
    """Make ``logging`` print TRACE for level 5."""
    if logging.getLevelName(TRACE_LEVEL_NUM) != "TRACE":
        logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")
