"""
Main logger for API Manager.

Wraps a standard ``logging.Logger`` and accepts structured keyword fields,
which are masked before being attached to the record.
"""

import logging
from typing import Optional, Any

from .config import LoggingConfig
from .formatters import get_formatter
from .filters import RequestContextFilter
from .handlers import create_console_handler, create_file_handler
from ...utils.sanitizer import mask_sensitive_data


class APIManagerLogger:
    """
    Structured logger used by the request pipeline.

    With a ``LoggingConfig`` the underlying logger gets its own handlers and
    stops propagating. Without one it is left untouched, so records flow to
    whatever the host application configured for ``api_manager``.

    Example:
        >>> config = LoggingConfig(level="DEBUG", format="json")
        >>> logger = APIManagerLogger(config)
        >>> logger.info("Request started", method="GET", url="https://api.com")
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "api_manager"):
        self.config = config
        self.name = name
        self._closed = False
        self._logger = logging.getLogger(name)

        if config is not None:
            self._configure(config)

    def _configure(self, config: LoggingConfig) -> None:
        level = getattr(logging, config.level.value)
        self._logger.setLevel(level)
        self._logger.propagate = False
        self._logger.handlers.clear()

        filters = [RequestContextFilter(config.static_fields)]
        formatter = get_formatter(config.format.value)

        if config.console:
            self._logger.addHandler(create_console_handler(level, formatter, filters))

        if config.file_path:
            self._logger.addHandler(create_file_handler(
                file_path=config.file_path,
                level=level,
                formatter=formatter,
                filters=filters
            ))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, extra=mask_sensitive_data(kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, extra=mask_sensitive_data(kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, extra=mask_sensitive_data(kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        """
        Log error message.

        Example:
            >>> logger.error("Response decoding failed", raw_body='{"id": "x"}')
        """
        self._logger.error(message, extra=mask_sensitive_data(kwargs))

    def close(self) -> None:
        """
        Flush and close handlers installed by this logger.

        Idempotent. Handlers of an unconfigured logger belong to the host
        application and are left alone.
        """
        if self._closed:
            return

        if self.config is not None:
            for handler in self._logger.handlers[:]:
                handler.flush()
                handler.close()
                self._logger.removeHandler(handler)

        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
