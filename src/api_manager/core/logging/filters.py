"""
Request id of the pipeline call in progress.

APIManager and AsyncAPIManager open a ``request_scope()`` per call; every
record logged inside it carries the same ``request_id``. The id lives in a
ContextVar, so concurrent threads and asyncio tasks each see their own.
"""

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Mapping, Optional

_request_id: ContextVar[Optional[str]] = ContextVar("api_manager_request_id", default=None)


def current_request_id() -> Optional[str]:
    """Id of the call in progress, None outside a pipeline call."""
    return _request_id.get()


@contextmanager
def request_scope(request_id: Optional[str] = None) -> Iterator[str]:
    """
    Bind a request id (a fresh uuid4 hex by default) for one call.

    The previous value is restored on exit, including after an exception.

    Example:
        >>> with request_scope() as request_id:
        ...     current_request_id() == request_id
        True
    """
    token = _request_id.set(request_id or uuid.uuid4().hex)
    try:
        yield _request_id.get()
    finally:
        _request_id.reset(token)


class RequestContextFilter(logging.Filter):
    """
    Stamps ``request_id`` and the configured static fields onto records.

    Values passed explicitly through ``extra`` win.
    """

    def __init__(self, static_fields: Optional[Mapping[str, Any]] = None):
        super().__init__()
        self.static_fields = dict(static_fields or {})

    def filter(self, record: logging.LogRecord) -> bool:
        request_id = _request_id.get()
        if request_id is not None:
            record.__dict__.setdefault('request_id', request_id)
        for key, value in self.static_fields.items():
            record.__dict__.setdefault(key, value)
        return True
