"""Console handler with ANSI colors"""

import sys
import traceback
from typing import Optional

from log_facade.core.handler import Handler
from log_facade.core.handler_config import HandlerConfig
from log_facade.core.log_record import LogRecord


class ConsoleHandler(Handler):
    """Write logs to console with optional colors."""

    def __init__(
        self,
        config: Optional[HandlerConfig] = None,
        stream=None,
        colored: bool = True,
        formatter=None,
    ):
        """
        Initialize console handler.

        Args:
            config: Level threshold and filter chain
            stream: Output stream (default: sys.stderr at write time)
            colored: Use ANSI color codes
            formatter: Log formatter (default: uses record's __str__)
        """
        super().__init__(config)
        self.stream = stream
        self.colored = colored
        self.formatter = formatter

    def emit(self, record: LogRecord) -> None:
        """Write log record to console."""
        stream = self.stream or sys.stderr

        if self.formatter:
            msg = self.formatter.format(record)
        else:
            msg = str(record)

        # Add colors if enabled
        if self.colored and not self.formatter:
            msg = f"{record.level.color_code}{msg}{record.level.reset_code}"

        if record.throwable is not None:
            exc = record.throwable
            msg += "\n" + "".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            ).rstrip("\n")

        stream.write(msg + "\n")
        stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        (self.stream or sys.stderr).flush()
