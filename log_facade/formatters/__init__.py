"""
Log formatters module

Provides formatter implementations for controlling log output format.
"""

from log_facade.formatters.base_formatter import BaseFormatter
from log_facade.formatters.text_formatter import TextFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
]
