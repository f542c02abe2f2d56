"""
Mapping between LogLevel and a host platform's native severity values
"""

from __future__ import annotations
from typing import Dict, Generic, Hashable, Mapping, TypeVar

from log_facade.core.log_level import LogLevel

N = TypeVar("N", bound=Hashable)


class LevelMapper(Generic[N]):
    """
    Two-way mapping between LogLevel and native levels.

    The table must cover every LogLevel and be one-to-one, so the two
    directions are mutual inverses. Anything outside the table is a
    programming error and raises.

    Example:
        mapper = LevelMapper({LogLevel.TRACE: 0, ...}, platform="mine")
        mapper.to_native_level(LogLevel.TRACE)   # 0
        mapper.from_native_level(0)              # LogLevel.TRACE
    """

    def __init__(self, table: Mapping[LogLevel, N], platform: str = "native"):
        missing = [level.name for level in LogLevel if level not in table]
        if missing:
            raise ValueError(f"{platform} level table is missing: {', '.join(missing)}")
        reverse: Dict[N, LogLevel] = {}
        for level, native in table.items():
            if not isinstance(level, LogLevel):
                raise TypeError(f"table keys must be LogLevel, got {level!r}")
            if native in reverse:
                raise ValueError(
                    f"{platform} level {native!r} is mapped from both "
                    f"{reverse[native].name} and {level.name}"
                )
            reverse[native] = level
        self.platform = platform
        self._to_native: Dict[LogLevel, N] = dict(table)
        self._from_native = reverse

    def to_native_level(self, level: LogLevel) -> N:
        """
        Convert a LogLevel to the platform level.

        Raises:
            TypeError: If level is not a LogLevel
        """
        if not isinstance(level, LogLevel):
            raise TypeError(f"expected LogLevel, got {level!r}")
        return self._to_native[level]

    def from_native_level(self, native: N) -> LogLevel:
        """
        Convert a platform level back to a LogLevel.

        Raises:
            ValueError: If native is not one of the mapped platform levels
        """
        try:
            return self._from_native[native]
        except (KeyError, TypeError):
            raise ValueError(f"unknown {self.platform} level: {native!r}") from None

    def native_levels(self):
        """Platform levels in LogLevel order."""
        return [self._to_native[level] for level in LogLevel]

    def __repr__(self) -> str:
        return f"LevelMapper(platform='{self.platform}')"
