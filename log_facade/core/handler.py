"""
Handler - gates log calls and emits accepted records to an output
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Tuple, Any
import sys
import threading

from log_facade.core.filter_result import FilterResult, evaluate_chain
from log_facade.core.handler_config import HandlerConfig
from log_facade.core.log_level import LogLevel
from log_facade.core.log_record import LogRecord
from log_facade.core.marker import Marker


class Handler(ABC):
    """
    Base class for log handlers.

    Decision order for ``is_loggable``:

    1. Below ``min_level``: not loggable. No filter is consulted.
    2. First decisive filter in the chain: ACCEPT is loggable, DENY is not.
    3. Every filter neutral (or no filters): loggable, since the level
       threshold already passed.

    ``publish`` never raises. Output failures are counted in
    ``error_count`` and reported on stderr.

    Subclasses implement ``emit`` and may override ``flush``/``close``.
    """

    def __init__(self, config: Optional[HandlerConfig] = None):
        self._config = config or HandlerConfig.default()
        self._error_count = 0
        self._error_lock = threading.Lock()

    @property
    def config(self) -> HandlerConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name or type(self).__name__

    @property
    def min_level(self) -> LogLevel:
        return self._config.min_level

    @property
    def filters(self) -> Tuple[Any, ...]:
        return self._config.filters

    @property
    def error_count(self) -> int:
        """Filter and output failures seen so far."""
        return self._error_count

    def is_loggable(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
        commit: bool = False,
    ) -> bool:
        """
        Decide whether a call would be emitted by this handler.

        Args:
            logger_name: Name of the logger making the call
            level: Level of the call
            marker: Optional marker
            throwable: Optional exception
            commit: True only on the path that goes on to publish, so
                stateful filters such as rate limits count the call.
                A plain guard leaves them untouched.

        Returns:
            True if the call passes the level gate and the filter chain
        """
        if level < self._config.min_level:
            return False
        try:
            result = evaluate_chain(
                self._config.filters, logger_name, level, marker, throwable, commit=commit
            )
        except Exception as e:
            # A broken filter drops the call rather than the caller
            self._count_error()
            self.report(f"filter error: {e}")
            return False
        return result is not FilterResult.DENY

    def publish(self, record: LogRecord) -> None:
        """
        Emit a record, absorbing any output failure.

        Args:
            record: Record already accepted by ``is_loggable``
        """
        try:
            self.emit(record)
        except Exception as e:
            self._count_error()
            self.handle_error(record, e)

    def _count_error(self) -> None:
        with self._error_lock:
            self._error_count += 1

    @abstractmethod
    def emit(self, record: LogRecord) -> None:
        """Write the record to the underlying output."""
        pass

    def handle_error(self, record: LogRecord, error: Exception) -> None:
        """Report an output failure. Must not raise."""
        self.report(f"write error: {error}")

    def report(self, text: str) -> None:
        """Write an internal diagnostic to stderr, ignoring a dead stderr."""
        try:
            print(f"Handler error ({self.name}): {text}", file=sys.stderr)
        except (OSError, ValueError, AttributeError):
            pass

    def flush(self) -> None:
        """Flush buffered output."""

    def close(self) -> None:
        """Release resources held by the handler."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(min_level={self._config.min_level}, "
            f"filters={len(self._config.filters)})"
        )
