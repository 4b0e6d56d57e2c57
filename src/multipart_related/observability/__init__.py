"""Observability module: structured logging setup."""

from .logging_config import JSONFormatter, configure_logging, get_logger

__all__ = [
    "JSONFormatter",
    "configure_logging",
    "get_logger",
]
