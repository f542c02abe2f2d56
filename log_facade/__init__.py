"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Log Facade - a pluggable logging facade with ordered filter chains
and platform level mapping
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from log_facade.core.log_level import LogLevel
from log_facade.core.filter_result import FilterResult
from log_facade.core.marker import Marker, get_marker
from log_facade.core.log_record import LogRecord
from log_facade.core.handler_config import HandlerConfig
from log_facade.core.handler import Handler
from log_facade.core.handler_builder import HandlerBuilder
from log_facade.core.logger import Logger
from log_facade.core.logger_builder import LoggerBuilder
from log_facade.core.logger_registry import get_logger

# Import submodules (not all classes by default)
from log_facade import filters
from log_facade import formatters
from log_facade import handlers
from log_facade import platform

__all__ = [
    "LogLevel",
    "FilterResult",
    "Marker",
    "get_marker",
    "LogRecord",
    "HandlerConfig",
    "Handler",
    "HandlerBuilder",
    "Logger",
    "LoggerBuilder",
    "get_logger",
    "filters",
    "formatters",
    "handlers",
    "platform",
]
