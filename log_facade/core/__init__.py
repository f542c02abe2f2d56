"""
Core module for the logging facade

This module contains the fundamental classes:
- LogLevel: Log level enumeration
- FilterResult: Tri-state filter decision
- Marker: Named tag attached to log calls
- LogRecord: Immutable record of one accepted call
- Handler / HandlerConfig / HandlerBuilder: Gate and emit records
- Logger / LoggerBuilder: Route calls to handlers
- get_logger: Process-wide logger registry
"""

from log_facade.core.log_level import LogLevel
from log_facade.core.filter_result import FilterResult, evaluate_chain
from log_facade.core.marker import Marker, MarkerFactory, get_marker
from log_facade.core.log_record import LogRecord
from log_facade.core.handler_config import HandlerConfig
from log_facade.core.handler import Handler
from log_facade.core.handler_builder import HandlerBuilder
from log_facade.core.logger import Logger
from log_facade.core.logger_registry import LoggerRegistry, get_logger, get_registry
from log_facade.core.logger_builder import LoggerBuilder

__all__ = [
    "LogLevel",
    "FilterResult",
    "evaluate_chain",
    "Marker",
    "MarkerFactory",
    "get_marker",
    "LogRecord",
    "HandlerConfig",
    "Handler",
    "HandlerBuilder",
    "Logger",
    "LoggerRegistry",
    "get_logger",
    "get_registry",
    "LoggerBuilder",
]
