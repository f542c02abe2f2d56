"""Handlers module - Log output adapters"""

from log_facade.handlers.android_handler import AndroidLogHandler, logcat_stream_sink
from log_facade.handlers.console_handler import ConsoleHandler
from log_facade.handlers.stdlib_handler import StdlibLoggingHandler

__all__ = ["AndroidLogHandler", "ConsoleHandler", "StdlibLoggingHandler", "logcat_stream_sink"]
