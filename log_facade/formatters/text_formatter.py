"""
Text formatter with customizable template

Formats log records using a template string with placeholders
"""

from typing import Optional

from log_facade.core.log_record import LogRecord
from log_facade.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log records using a customizable template.

    Supports placeholders for all LogRecord fields.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] [{level:8}] [{thread}] {message}"

    # Android already stamps time, level, tag and thread
    ANDROID_TEMPLATE = "{location}{message}"

    def __init__(self, template: Optional[str] = None, timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f"):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Timestamp
                     - {level}: Log level name
                     - {level:8}: Log level with padding
                     - {message}: Log message
                     - {thread}: Thread name
                     - {thread_id}: Thread ID
                     - {logger}: Logger name
                     - {marker}: Marker, empty if absent
                     - {file}: File name
                     - {line}: Line number
                     - {function}: Function name
                     - {location}: "(function:line) " if captured, else empty
            timestamp_format: strftime format for timestamps

        Example:
            # Default format
            formatter = TextFormatter()

            # Custom format
            formatter = TextFormatter("{level} - {message}")

            # Detailed format
            formatter = TextFormatter(
                "{timestamp} [{level}] {logger}:{function} - {message}"
            )
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

    def format(self, record: LogRecord) -> str:
        """
        Format log record using the template.

        Args:
            record: Log record to format

        Returns:
            Formatted string
        """
        timestamp_str = record.timestamp.strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            timestamp_str = timestamp_str[:-3]  # Milliseconds

        location = ""
        if record.has_location:
            location = f"({record.function_name}:{record.line_number}) "

        format_dict = {
            "timestamp": timestamp_str,
            "level": record.level.name,
            "message": record.message,
            "thread": record.thread_name,
            "thread_id": record.thread_id,
            "logger": record.logger_name,
            "marker": str(record.marker) if record.marker is not None else "",
            "file": record.file_name,
            "line": record.line_number,
            "function": record.function_name,
            "location": location,
        }

        try:
            return self.template.format(**format_dict)
        except (KeyError, IndexError, ValueError) as e:
            # Fallback if template is broken
            return f"[FORMAT ERROR: {e}] {record.message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
