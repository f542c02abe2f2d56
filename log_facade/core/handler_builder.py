"""Handler builder pattern"""

from typing import Any, Dict, Iterable, List, Type, Union

from log_facade.core.handler import Handler
from log_facade.core.handler_config import HandlerConfig
from log_facade.core.log_level import LogLevel


class HandlerBuilder:
    """
    Builder pattern for handler construction.

    Every ``build()`` returns a new handler holding its own immutable
    snapshot of the configuration, so one builder can stamp out several
    handlers.

    Example:
        from log_facade.filters import MarkerFilter, RateLimitFilter
        from log_facade.handlers import AndroidLogHandler

        handler = (HandlerBuilder(AndroidLogHandler, sink=write_native_log)
            .with_level(LogLevel.INFO)
            .with_filter(RateLimitFilter(max_events=20, interval=1.0))
            .with_filter(MarkerFilter(get_marker("AUDIT")))
            .build())
    """

    def __init__(self, handler_cls: Type[Handler], **options: Any):
        if not (isinstance(handler_cls, type) and issubclass(handler_cls, Handler)):
            raise TypeError("handler_cls must be a Handler subclass")
        self._handler_cls = handler_cls
        self._options: Dict[str, Any] = dict(options)
        self._name = ""
        self._min_level = LogLevel.TRACE
        self._filters: List[Any] = []
        self._include_location = False

    def with_name(self, name: str) -> "HandlerBuilder":
        """Set handler display name."""
        self._name = name
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "HandlerBuilder":
        """
        Set minimum log level.

        Raises:
            TypeError: If level is neither a LogLevel nor a level name
            ValueError: If level is an unknown level name
        """
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        self._min_level = level
        return self

    def with_filter(self, log_filter) -> "HandlerBuilder":
        """
        Append a filter to the chain.

        Filters are evaluated in the order they were added; the first
        ACCEPT or DENY decides.

        Raises:
            TypeError: If log_filter has no evaluate() method
        """
        if not callable(getattr(log_filter, "evaluate", None)):
            raise TypeError(f"not a filter: {log_filter!r}")
        self._filters.append(log_filter)
        return self

    def with_filters(self, filters: Iterable) -> "HandlerBuilder":
        """Append several filters, keeping their order."""
        for log_filter in filters:
            self.with_filter(log_filter)
        return self

    def with_location(self, enabled: bool = True) -> "HandlerBuilder":
        """Capture caller file/line/function for this handler's records."""
        self._include_location = enabled
        return self

    def with_option(self, key: str, value: Any) -> "HandlerBuilder":
        """Set a handler-specific constructor option."""
        self._options[key] = value
        return self

    def build_config(self) -> HandlerConfig:
        return HandlerConfig(
            name=self._name,
            min_level=self._min_level,
            filters=tuple(self._filters),
            include_location=self._include_location,
        )

    def build(self) -> Handler:
        """Build and return configured handler."""
        return self._handler_cls(config=self.build_config(), **self._options)
