# src/api_manager/core/transport.py
"""
Transport capability: the component that performs network I/O.

The pipeline only needs ``execute(HTTPRequest) -> HTTPResponseEnvelope``.
Failures are raised as the transport's own exceptions.
"""

from abc import ABC, abstractmethod
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from .config import TimeoutConfig
from .models import HTTPRequest, HTTPResponseEnvelope


class Transport(ABC):
    """Базовый класс синхронных транспортов."""

    @abstractmethod
    def execute(self, request: HTTPRequest) -> HTTPResponseEnvelope:
        """
        Выполнить запрос.

        Raises:
            Любое исключение транспорта (сеть, таймаут, TLS)
        """
        pass

    def close(self) -> None:
        """Освободить ресурсы транспорта."""
        pass


class RequestsTransport(Transport):
    """
    Транспорт на базе requests.Session.

    Ретраи отключены на уровне адаптера: пайплайн их не делает.

    Example:
        >>> transport = RequestsTransport(timeout=TimeoutConfig(connect=3, read=10))
        >>> envelope = transport.execute(HTTPRequest("GET", "https://api.example.com"))
        >>> envelope.status_code
        200
    """

    def __init__(
        self,
        timeout: Optional[TimeoutConfig] = None,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self._timeout = timeout or TimeoutConfig()
        self._verify_ssl = verify_ssl
        self._owns_session = session is None
        self._session = session or self._create_session()

    @staticmethod
    def _create_session() -> requests.Session:
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=0)
        session.mount('http://', adapter)
        session.mount('https://', adapter)
        return session

    @property
    def session(self) -> requests.Session:
        return self._session

    def execute(self, request: HTTPRequest) -> HTTPResponseEnvelope:
        response = self._session.request(
            method=request.method,
            url=request.url,
            headers=dict(request.headers),
            data=request.body,
            timeout=self._timeout.as_tuple(),
            verify=self._verify_ssl,
        )
        return HTTPResponseEnvelope(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        if self._owns_session:
            self._session.close()
