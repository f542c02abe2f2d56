"""
Log record - immutable snapshot of one accepted log call
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any
import threading

from log_facade.core.log_level import LogLevel
from log_facade.core.marker import Marker


@dataclass(frozen=True)
class LogRecord:
    """
    Log record data structure.

    Built once per accepted log call and handed, as the same instance,
    to every accepting handler. Marker and throwable are None when absent.
    """

    level: LogLevel
    message: str
    logger_name: str = ""
    marker: Optional[Marker] = None
    throwable: Optional[BaseException] = None
    timestamp: datetime = field(default_factory=datetime.now)
    thread_id: int = field(default_factory=threading.get_ident)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)
    file_name: str = ""
    line_number: int = 0
    function_name: str = ""

    def __post_init__(self):
        """Validate log record after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))
        if self.marker is not None and not isinstance(self.marker, Marker):
            raise TypeError("marker must be a Marker or None")
        if self.throwable is not None and not isinstance(self.throwable, BaseException):
            raise TypeError("throwable must be an exception or None")

    @property
    def has_location(self) -> bool:
        """True if caller location was captured for this record."""
        return bool(self.file_name)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "logger_name": self.logger_name,
            "marker": str(self.marker) if self.marker is not None else "",
            "throwable": repr(self.throwable) if self.throwable is not None else "",
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            "thread_name": self.thread_name,
            "file_name": self.file_name,
            "line_number": self.line_number,
            "function_name": self.function_name,
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.name:8}] "
            f"[{self.thread_name}] "
            f"{self.message}"
        )
