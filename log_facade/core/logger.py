"""
Main Logger class - routes log calls to attached handlers
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, Optional, Tuple, Union
import inspect
import os
import sys
import threading

from log_facade.core.handler import Handler
from log_facade.core.log_level import LogLevel
from log_facade.core.log_record import LogRecord
from log_facade.core.marker import Marker, get_marker

Message = Union[str, Callable[[], Any]]

_SRCFILE = os.path.normcase(__file__)


class Logger:
    """
    Named logger that routes calls through its handlers.

    A call below ``effective_level`` is dropped before any handler is
    asked. Otherwise every attached handler is asked ``is_loggable`` in
    attachment order. If none accepts, nothing else happens: the message
    is not formatted and no record is built. Otherwise one LogRecord is
    built and published to each accepting handler, in the same order.

    ``message`` may be a string, %-formatted with ``args`` only when some
    handler accepts, or a zero-argument callable called at most once.

    ``marker`` may be a Marker or a marker name; a name is resolved with
    ``get_marker``. Calls without a marker carry the logger's own marker.

    Thread Safety:
        The handler list is copy-on-write. ``add_handler`` and
        ``remove_handler`` swap in a new tuple under a lock; each ``log``
        call works on the tuple it read first. Metrics are updated under
        the same lock.

    Example:
        logger = Logger("svc.auth", [ConsoleHandler()])
        logger.info("user %s logged in", user_id)
        logger.debug(lambda: expensive_dump(state))
    """

    def __init__(
        self,
        name: str,
        handlers: Optional[Iterable[Handler]] = None,
        level: Optional[Union[LogLevel, str]] = None,
        marker: Optional[Union[Marker, str]] = None,
        include_location: bool = False,
        parent_lookup: Optional[Callable[[str], Optional["Logger"]]] = None,
    ):
        """
        Initialize logger.

        Args:
            name: Dotted logger name
            handlers: Handlers to attach, in order
            level: Own threshold; None inherits from the nearest ancestor
            marker: Marker used for calls that pass none
            include_location: Capture caller location for every record
            parent_lookup: Returns the logger registered under a name, or
                None; used to find ancestors for ``effective_level``
        """
        self._name = name
        self._handlers: Tuple[Handler, ...] = ()
        self._lock = threading.Lock()
        self._metrics = {"logged": 0, "filtered": 0, "published": 0}
        self._level = _check_level(level)
        self._marker = _coerce_marker(marker)
        self._include_location = bool(include_location)
        self._parent_lookup = parent_lookup
        for handler in handlers or ():
            self.add_handler(handler)

    @property
    def name(self) -> str:
        return self._name

    @property
    def handlers(self) -> Tuple[Handler, ...]:
        """Snapshot of attached handlers, in attachment order."""
        return self._handlers

    @property
    def log_level(self) -> Optional[LogLevel]:
        """This logger's own threshold, None when inherited."""
        return self._level

    @log_level.setter
    def log_level(self, level: Optional[Union[LogLevel, str]]) -> None:
        self._level = _check_level(level)

    @property
    def effective_level(self) -> LogLevel:
        """
        Threshold applied before any handler is asked.

        The logger's own level if set, else the level of the nearest
        dotted ancestor that has one ("a.b" for "a.b.c", then "a", then
        the root logger named ""), else TRACE.
        """
        if self._level is not None:
            return self._level
        if self._parent_lookup is not None:
            name = self._name
            while name:
                name = name.rpartition(".")[0]
                parent = self._parent_lookup(name)
                if parent is not None and parent.log_level is not None:
                    return parent.log_level
        return LogLevel.TRACE

    @property
    def marker(self) -> Optional[Marker]:
        return self._marker

    @marker.setter
    def marker(self, marker: Optional[Union[Marker, str]]) -> None:
        self._marker = _coerce_marker(marker)

    @property
    def include_location(self) -> bool:
        return self._include_location

    @include_location.setter
    def include_location(self, enabled: bool) -> None:
        self._include_location = bool(enabled)

    def add_handler(self, handler: Handler) -> None:
        """Attach a handler at the end of the chain."""
        if not isinstance(handler, Handler):
            raise TypeError("handler must be a Handler")
        with self._lock:
            self._handlers = self._handlers + (handler,)

    def remove_handler(self, handler: Handler) -> bool:
        """
        Detach a handler.

        Returns:
            True if the handler was attached
        """
        with self._lock:
            if handler not in self._handlers:
                return False
            self._handlers = tuple(h for h in self._handlers if h is not handler)
            return True

    def clear_handlers(self) -> None:
        with self._lock:
            self._handlers = ()

    def is_loggable(
        self,
        level: LogLevel,
        marker: Optional[Union[Marker, str]] = None,
        throwable: Optional[BaseException] = None,
    ) -> bool:
        """
        True if at least one attached handler would emit this call.

        Has no side effects: rate limits and other stateful filters are
        consulted without counting the call, so the usual guard
        ``if logger.is_loggable(level): logger.log(level, ...)`` uses up
        quota once, in ``log``.
        """
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        marker = self._resolve_marker(marker)
        _check_throwable(throwable)
        if level < self.effective_level:
            return False
        return any(
            h.is_loggable(self._name, level, marker, throwable) for h in self._handlers
        )

    def log(
        self,
        level: LogLevel,
        message: Message,
        *args: Any,
        marker: Optional[Union[Marker, str]] = None,
        throwable: Optional[BaseException] = None,
    ) -> None:
        """
        Log a message.

        Raises:
            TypeError: If level is not a LogLevel, marker is not a Marker,
                a str or None, or throwable is not an exception or None
        """
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        marker = self._resolve_marker(marker)
        _check_throwable(throwable)

        if level < self.effective_level:
            return

        handlers = self._handlers
        if not handlers:
            return

        accepting = [
            h for h in handlers
            if h.is_loggable(self._name, level, marker, throwable, commit=True)
        ]
        if not accepting:
            self._count(filtered=1)
            return

        location = ("", 0, "")
        if self._include_location or any(h.config.include_location for h in accepting):
            location = _find_caller()

        record = LogRecord(
            level=level,
            message=_materialize(message, args),
            logger_name=self._name,
            marker=marker,
            throwable=throwable,
            file_name=location[0],
            line_number=location[1],
            function_name=location[2],
        )

        for handler in accepting:
            handler.publish(record)
        self._count(logged=1, published=len(accepting))

    def trace(self, message: Message, *args: Any, **kwargs: Any) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, message, *args, **kwargs)

    def debug(self, message: Message, *args: Any, **kwargs: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, *args, **kwargs)

    def info(self, message: Message, *args: Any, **kwargs: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, *args, **kwargs)

    def warn(self, message: Message, *args: Any, **kwargs: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, *args, **kwargs)

    def error(self, message: Message, *args: Any, **kwargs: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, message, *args, **kwargs)

    def critical(self, message: Message, *args: Any, **kwargs: Any) -> None:
        """Log critical message."""
        self.log(LogLevel.CRITICAL, message, *args, **kwargs)

    def exception(
        self, message: Message, *args: Any, marker: Optional[Union[Marker, str]] = None
    ) -> None:
        """Log at ERROR with the exception currently being handled."""
        self.log(LogLevel.ERROR, message, *args, marker=marker, throwable=sys.exc_info()[1])

    def flush(self) -> None:
        """Flush all handlers."""
        for handler in self._handlers:
            handler.flush()

    def shutdown(self) -> None:
        """Close and detach all handlers."""
        with self._lock:
            handlers, self._handlers = self._handlers, ()
        for handler in handlers:
            handler.close()

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def _count(self, **increments: int) -> None:
        with self._lock:
            for key, amount in increments.items():
                self._metrics[key] += amount

    def _resolve_marker(self, marker: Optional[Union[Marker, str]]) -> Optional[Marker]:
        marker = _coerce_marker(marker)
        return self._marker if marker is None else marker

    def __repr__(self) -> str:
        return f"Logger(name='{self._name}', handlers={len(self._handlers)})"


def _check_level(level: Optional[Union[LogLevel, str]]) -> Optional[LogLevel]:
    if level is None or isinstance(level, LogLevel):
        return level
    if isinstance(level, str):
        return LogLevel.from_string(level)
    raise TypeError("level must be LogLevel enum, a level name or None")


def _coerce_marker(marker: Optional[Union[Marker, str]]) -> Optional[Marker]:
    if marker is None or isinstance(marker, Marker):
        return marker
    if isinstance(marker, str):
        return get_marker(marker)
    raise TypeError("marker must be Marker, a marker name or None")


def _check_throwable(throwable: Optional[BaseException]) -> None:
    if throwable is not None and not isinstance(throwable, BaseException):
        raise TypeError("throwable must be an exception or None")


def _materialize(message: Message, args: Tuple[Any, ...]) -> str:
    """Produce the final message text; never raises."""
    try:
        if callable(message):
            text = message()
        else:
            text = message % args if args else message
        return text if isinstance(text, str) else str(text)
    except Exception as e:
        return f"[FORMAT ERROR: {e}] {message!r}"


def _find_caller() -> Tuple[str, int, str]:
    """Locate the first stack frame outside this module."""
    frame = inspect.currentframe()
    while frame is not None:
        code = frame.f_code
        if os.path.normcase(code.co_filename) != _SRCFILE:
            return os.path.basename(code.co_filename), frame.f_lineno, code.co_name
        frame = frame.f_back
    return "", 0, ""
