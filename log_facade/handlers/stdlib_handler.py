"""Bridge to the Python standard library logging module"""

import logging
from typing import Optional

from log_facade.core.handler import Handler
from log_facade.core.handler_config import HandlerConfig
from log_facade.core.log_record import LogRecord
from log_facade.platform.stdlib import register_trace_level, to_stdlib_level


class StdlibLoggingHandler(Handler):
    """
    Forward records to ``logging`` loggers of the same name.

    Lets applications keep their existing ``logging`` configuration
    (handlers, formatters, dictConfig) as the output stage.

    Args:
        config: Level threshold and filter chain
        logger_prefix: Prepended to record logger names, e.g. "app."
    """

    def __init__(self, config: Optional[HandlerConfig] = None, logger_prefix: str = ""):
        super().__init__(config)
        self.logger_prefix = logger_prefix
        register_trace_level()

    def emit(self, record: LogRecord) -> None:
        target = logging.getLogger(self.logger_prefix + record.logger_name)
        native = to_stdlib_level(record.level)
        if not target.isEnabledFor(native):
            return

        exc_info = None
        if record.throwable is not None:
            exc = record.throwable
            exc_info = (type(exc), exc, exc.__traceback__)

        std_record = target.makeRecord(
            target.name,
            native,
            record.file_name or "(unknown file)",
            record.line_number,
            record.message,
            (),
            exc_info,
            func=record.function_name or None,
            extra={
                "marker": str(record.marker) if record.marker is not None else "",
            },
        )
        std_record.created = record.timestamp.timestamp()
        std_record.thread = record.thread_id
        std_record.threadName = record.thread_name
        target.handle(std_record)
