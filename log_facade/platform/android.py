"""
Android log levels and tag conventions

Numeric values match android.util.Log.
"""

from enum import IntEnum

from log_facade.core.log_level import LogLevel
from log_facade.platform.level_mapper import LevelMapper

MAX_TAG_LENGTH = 23
MAX_LOG_LENGTH = 4000


class AndroidLevel(IntEnum):
    """Native Android log priorities."""

    VERBOSE = 2
    DEBUG = 3
    INFO = 4
    WARN = 5
    ERROR = 6
    ASSERT = 7

    @property
    def letter(self) -> str:
        """Single-letter priority used by logcat (V, D, I, W, E, A)."""
        return self.name[0]


ANDROID_LEVEL_MAPPER: LevelMapper[AndroidLevel] = LevelMapper(
    {
        LogLevel.TRACE: AndroidLevel.VERBOSE,
        LogLevel.DEBUG: AndroidLevel.DEBUG,
        LogLevel.INFO: AndroidLevel.INFO,
        LogLevel.WARN: AndroidLevel.WARN,
        LogLevel.ERROR: AndroidLevel.ERROR,
        LogLevel.CRITICAL: AndroidLevel.ASSERT,
    },
    platform="android",
)


def to_android_level(level: LogLevel) -> AndroidLevel:
    return ANDROID_LEVEL_MAPPER.to_native_level(level)


def from_android_level(native: int) -> LogLevel:
    """Accepts an AndroidLevel or its plain int value."""
    return ANDROID_LEVEL_MAPPER.from_native_level(native)


def tag_from_name(name: str) -> str:
    """
    Derive an Android log tag from a dotted logger name.

    Keeps the last dotted segment, strips an inner-class ``$`` suffix and
    truncates to the platform's tag limit.

    Example:
        tag_from_name("com.example.app.MainActivity$Inner")  # "MainActivity"
    """
    tag = name[name.rfind(".") + 1:]
    inner = tag.find("$")
    if inner > 0:
        tag = tag[:inner]
    return tag[:MAX_TAG_LENGTH]


def split_message(message: str, max_length: int = MAX_LOG_LENGTH):
    """
    Split a message into chunks the native log accepts.

    Prefers to break at a newline inside each chunk.
    """
    if len(message) <= max_length:
        return [message]
    chunks = []
    start = 0
    while start < len(message):
        end = min(start + max_length, len(message))
        if end < len(message):
            newline = message.rfind("\n", start, end)
            if newline > start:
                end = newline
        chunks.append(message[start:end])
        start = end + 1 if end < len(message) and message[end] == "\n" else end
    return chunks
