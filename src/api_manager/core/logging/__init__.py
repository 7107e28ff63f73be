"""
Logging system for API Manager.

Example:
    >>> from api_manager.core.logging import LoggingConfig, APIManagerLogger
    >>>
    >>> config = LoggingConfig(level="DEBUG", format="json")
    >>> logger = APIManagerLogger(config)
    >>> logger.info("Request started", method="GET", url="https://api.com")
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import APIManagerLogger
from .formatters import JSONFormatter, TextFormatter, get_formatter
from .filters import RequestContextFilter, current_request_id, request_scope
from .handlers import create_console_handler, create_file_handler

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "APIManagerLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
    # Filters
    "RequestContextFilter",
    "current_request_id",
    "request_scope",
    # Handlers
    "create_console_handler",
    "create_file_handler",
]
