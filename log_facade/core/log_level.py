"""
Log level enumeration

Six fixed severities, ordered from least to most severe.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module, so comparing two
    levels by value gives the same answer as comparing them by ordinal.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    CRITICAL = 50   # Critical errors

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def ordinal(self) -> int:
        """Zero-based position in severity order."""
        return _ORDINALS[self]

    def is_at_least(self, other: "LogLevel") -> bool:
        """Return True if this level is as severe as ``other`` or more."""
        return self >= other

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive). ``WARNING`` and
                ``FATAL`` are accepted as aliases.

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        name = LEVEL_ALIASES.get(name, name)
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.TRACE: "\033[37m",     # White
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
            LogLevel.CRITICAL: "\033[35m",  # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


_ORDINALS: Dict[LogLevel, int] = {level: i for i, level in enumerate(LogLevel)}

LEVEL_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
    "FATAL": "CRITICAL",
}
