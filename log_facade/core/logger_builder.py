"""Logger builder pattern"""

from typing import List, Optional, Union

from log_facade.core.handler import Handler
from log_facade.core.handler_builder import HandlerBuilder
from log_facade.core.log_level import LogLevel
from log_facade.core.logger import Logger
from log_facade.core.marker import Marker
from log_facade.handlers.android_handler import AndroidLogHandler, NativeLogSink
from log_facade.handlers.console_handler import ConsoleHandler


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Handlers are attached in the order they were added.

    Example:
        logger = (LoggerBuilder()
            .with_name("svc.auth")
            .with_console(LogLevel.INFO, colored=False)
            .add_handler(audit_handler)
            .build())
    """

    def __init__(self):
        self._name = "logger"
        self._handlers: List[Handler] = []
        self._level: Optional[Union[LogLevel, str]] = None
        self._marker: Optional[Union[Marker, str]] = None
        self._include_location = False

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_level(self, level: Optional[Union[LogLevel, str]]) -> "LoggerBuilder":
        """Set the logger's own threshold, checked before any handler."""
        self._level = level
        return self

    def with_marker(self, marker: Optional[Union[Marker, str]]) -> "LoggerBuilder":
        """Set the marker used for calls that pass none."""
        self._marker = marker
        return self

    def with_location(self, enabled: bool = True) -> "LoggerBuilder":
        """Capture caller location for every record."""
        self._include_location = enabled
        return self

    def add_handler(self, handler: Handler) -> "LoggerBuilder":
        """
        Add a custom handler.

        Args:
            handler: Handler instance

        Returns:
            Self for method chaining
        """
        if not isinstance(handler, Handler):
            raise TypeError("handler must be a Handler")
        self._handlers.append(handler)
        return self

    def with_console(
        self,
        level: Union[LogLevel, str] = LogLevel.TRACE,
        colored: bool = True,
        stream=None,
    ) -> "LoggerBuilder":
        """Add a console handler."""
        handler = (HandlerBuilder(ConsoleHandler, colored=colored, stream=stream)
            .with_level(level)
            .build())
        return self.add_handler(handler)

    def with_android(
        self,
        level: Union[LogLevel, str] = LogLevel.TRACE,
        sink: Optional[NativeLogSink] = None,
        include_location: bool = False,
    ) -> "LoggerBuilder":
        """Add an Android log handler writing to ``sink``."""
        handler = (HandlerBuilder(AndroidLogHandler, sink=sink)
            .with_level(level)
            .with_location(include_location)
            .build())
        return self.add_handler(handler)

    def build(self) -> Logger:
        """Build and return configured logger."""
        return Logger(
            self._name,
            self._handlers,
            level=self._level,
            marker=self._marker,
            include_location=self._include_location,
        )
