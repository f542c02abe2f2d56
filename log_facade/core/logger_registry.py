"""
Process-wide registry of named loggers

Lifecycle: the default registry is created when this module is first
imported and lives for the rest of the process. Reads and the rare
insert/remove go through one lock. Handlers installed with
``set_default_handlers`` are attached to loggers created afterwards;
existing loggers are left alone.

Loggers created here find their ancestors through the registry, so a
level set on "svc" applies to "svc.auth" unless "svc.auth" sets its own.
The logger named "" is the root and sits above every other name.
"""

from __future__ import annotations
import threading
from typing import Dict, Iterable, List, Optional, Tuple

from log_facade.core.handler import Handler
from log_facade.core.logger import Logger


class LoggerRegistry:
    """Get-or-create store of Logger instances keyed by name."""

    def __init__(self):
        self._loggers: Dict[str, Logger] = {}
        self._default_handlers: Tuple[Handler, ...] = ()
        self._lock = threading.Lock()

    def get(self, name: str) -> Logger:
        """Return the logger named ``name``, creating it on first use."""
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = Logger(name, self._default_handlers, parent_lookup=self.find)
                self._loggers[name] = logger
            return logger

    def find(self, name: str) -> Optional[Logger]:
        """Return the logger named ``name`` if it exists, without creating it."""
        with self._lock:
            return self._loggers.get(name)

    def root(self) -> Logger:
        """The root logger, named ""."""
        return self.get("")

    def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._loggers

    def remove(self, name: str) -> bool:
        with self._lock:
            return self._loggers.pop(name, None) is not None

    def names(self) -> List[str]:
        with self._lock:
            return list(self._loggers.keys())

    def set_default_handlers(self, handlers: Iterable[Handler]) -> None:
        handlers = tuple(handlers)
        for handler in handlers:
            if not isinstance(handler, Handler):
                raise TypeError("handler must be a Handler")
        with self._lock:
            self._default_handlers = handlers

    def clear(self) -> None:
        """Forget every logger and the default handlers."""
        with self._lock:
            self._loggers.clear()
            self._default_handlers = ()


_registry = LoggerRegistry()


def get_logger(name: str) -> Logger:
    """Get or create the process-wide logger named ``name``."""
    return _registry.get(name)


def get_registry() -> LoggerRegistry:
    return _registry
