"""Structured JSON logging configuration.

Provides centralized logging setup with JSON formatting. Library modules log
through logging.getLogger(__name__) and never configure handlers themselves;
applications call configure_logging() once at startup.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from ..config import get_settings

# Extra record attributes promoted into the JSON payload
EXTRA_FIELDS = ("boundary", "subtype", "part_count")


class JSONFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string.

        Args:
            record: Log record to format

        Returns:
            str: JSON-formatted log message
        """
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "message": record.getMessage(),
        }

        # Add exception info if present
        if record.exc_info:
            log_data["error"] = str(record.exc_info[1])
            log_data["traceback"] = self.formatException(record.exc_info)

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data)


def configure_logging(level: Optional[str] = None, json_format: Optional[bool] = None) -> None:
    """Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR); defaults to Settings.LOG_LEVEL
        json_format: If True, use JSON formatter; otherwise use simple format.
            Defaults to Settings.LOG_JSON_FORMAT
    """
    settings = get_settings()
    if level is None:
        level = settings.LOG_LEVEL
    if json_format is None:
        json_format = settings.LOG_JSON_FORMAT

    log_level = getattr(logging, level.upper())

    # Get root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    root_logger.handlers.clear()

    # Create console handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    # Set formatter
    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(name)s.%(funcName)s - %(message)s'
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)
