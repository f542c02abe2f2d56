"""
Callback-based filter

Filters log calls using custom callback functions
"""

import sys
import threading
from typing import Callable, Optional, Union

from log_facade.core.filter_result import FilterResult
from log_facade.core.log_level import LogLevel
from log_facade.core.marker import Marker
from log_facade.filters.base_filter import BaseFilter

FilterCallback = Callable[
    [str, LogLevel, Optional[Marker], Optional[BaseException]],
    Union[FilterResult, bool],
]


class CallbackFilter(BaseFilter):
    """
    Filter log calls using a custom callback function.

    Provides maximum flexibility for filtering logic.
    """

    def __init__(
        self,
        callback: FilterCallback,
        when_matched: FilterResult = FilterResult.NEUTRAL,
        when_differ: FilterResult = FilterResult.DENY,
    ):
        """
        Initialize callback filter.

        Args:
            callback: Function taking (logger_name, level, marker, throwable).
                     It may return a FilterResult, which is used as is, or
                     a truth value, mapped to when_matched / when_differ.
            when_matched: Result for a truthy callback return
            when_differ: Result for a falsy callback return

        Example:
            # Only the main thread
            def only_main_thread(name, level, marker, throwable):
                return threading.current_thread() is threading.main_thread()

            filter = CallbackFilter(only_main_thread)

            # Decide directly
            def errors_always(name, level, marker, throwable):
                if level >= LogLevel.ERROR:
                    return FilterResult.ACCEPT
                return FilterResult.NEUTRAL

            filter = CallbackFilter(errors_always)
        """
        super().__init__(when_matched, when_differ)
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback
        self.error_count = 0
        self._lock = threading.Lock()

    def evaluate(
        self,
        logger_name: str,
        level: LogLevel,
        marker: Optional[Marker] = None,
        throwable: Optional[BaseException] = None,
    ) -> FilterResult:
        """
        Use callback to decide on the call.

        Returns:
            Result of callback function, NEUTRAL if the callback raised
        """
        try:
            outcome = self.callback(logger_name, level, marker, throwable)
        except Exception as e:
            # Report the error and defer to the rest of the chain
            with self._lock:
                self.error_count += 1
            print(f"Filter callback error: {e}", file=sys.stderr)
            return FilterResult.NEUTRAL

        if isinstance(outcome, FilterResult):
            return outcome
        return self.result(bool(outcome))

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
