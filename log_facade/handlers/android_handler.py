"""
Android log handler

Sends records to the host's native log primitive, one call per chunk.
"""

from __future__ import annotations
import sys
import traceback
from typing import Callable, Optional

from log_facade.core.handler import Handler
from log_facade.core.handler_config import HandlerConfig
from log_facade.core.log_record import LogRecord
from log_facade.formatters.text_formatter import TextFormatter
from log_facade.platform.android import (
    AndroidLevel,
    MAX_LOG_LENGTH,
    split_message,
    tag_from_name,
    to_android_level,
)

# (native_level, tag, message, throwable)
NativeLogSink = Callable[[AndroidLevel, str, str, Optional[BaseException]], None]


def logcat_stream_sink(stream=None) -> NativeLogSink:
    """
    Build a sink that writes logcat-style lines to a stream.

    Used when no native primitive is supplied, e.g. off-device.
    Lines look like ``D/MainActivity: message``.
    """

    def write_native_log(
        level: AndroidLevel,
        tag: str,
        message: str,
        throwable: Optional[BaseException],
    ) -> None:
        out = stream or sys.stderr
        out.write(f"{level.letter}/{tag}: {message}\n")
        if throwable is not None:
            for line in traceback.format_exception(
                type(throwable), throwable, throwable.__traceback__
            ):
                for part in line.rstrip("\n").split("\n"):
                    out.write(f"{level.letter}/{tag}: {part}\n")
        out.flush()

    return write_native_log


class AndroidLogHandler(Handler):
    """
    Handler for the Android log.

    Maps LogLevel to Android priorities (TRACE is VERBOSE, CRITICAL is
    ASSERT), derives the tag from the logger name and splits long
    messages at the native length limit. The throwable is passed with
    the first chunk only.

    Example:
        def write_native_log(level, tag, message, throwable):
            android_log.println(int(level), tag, message)

        handler = (HandlerBuilder(AndroidLogHandler, sink=write_native_log)
            .with_level(LogLevel.DEBUG)
            .build())
    """

    def __init__(
        self,
        config: Optional[HandlerConfig] = None,
        sink: Optional[NativeLogSink] = None,
        formatter=None,
        max_log_length: int = MAX_LOG_LENGTH,
    ):
        super().__init__(config)
        if max_log_length <= 0:
            raise ValueError("max_log_length must be positive")
        self.sink = sink or logcat_stream_sink()
        self.formatter = formatter or TextFormatter(TextFormatter.ANDROID_TEMPLATE)
        self.max_log_length = max_log_length

    def emit(self, record: LogRecord) -> None:
        level = to_android_level(record.level)
        tag = tag_from_name(record.logger_name) or "log"
        message = self.formatter.format(record)

        throwable = record.throwable
        for chunk in split_message(message, self.max_log_length):
            self.sink(level, tag, chunk, throwable)
            throwable = None
