"""
Handler configuration management
"""

from dataclasses import dataclass
from typing import Tuple, Any

from log_facade.core.log_level import LogLevel


@dataclass(frozen=True)
class HandlerConfig:
    """
    Handler configuration.

    Immutable once built. ``filters`` is kept in attachment order, which
    decides the outcome when more than one filter is decisive.
    """

    # Display name, used in error reports
    name: str = ""

    # Calls below this level are never emitted, whatever the filters say
    min_level: LogLevel = LogLevel.TRACE

    # Ordered filter chain
    filters: Tuple[Any, ...] = ()

    # Ask the logger to capture file/line/function of the caller
    include_location: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        min_level = self.min_level
        if isinstance(min_level, str):
            min_level = LogLevel.from_string(min_level)
            object.__setattr__(self, "min_level", min_level)
        if not isinstance(min_level, LogLevel):
            raise TypeError("min_level must be LogLevel enum")

        filters = tuple(self.filters)
        for log_filter in filters:
            if not callable(getattr(log_filter, "evaluate", None)):
                raise TypeError(f"not a filter: {log_filter!r}")
        object.__setattr__(self, "filters", filters)

    @classmethod
    def default(cls) -> "HandlerConfig":
        """Create default configuration: everything loggable."""
        return cls()

    @classmethod
    def debug_config(cls) -> "HandlerConfig":
        """Create configuration for debugging."""
        return cls(min_level=LogLevel.DEBUG, include_location=True)

    @classmethod
    def production_config(cls) -> "HandlerConfig":
        """Create configuration for production."""
        return cls(min_level=LogLevel.WARN)
