# src/api_manager/async_manager.py
"""
Асинхронный пайплайн запросов на базе httpx.

Та же семантика, что у APIManager: единственная точка ожидания -
вызов транспорта, состояние между вызовами не хранится.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type, TypeVar

try:
    import httpx
except ImportError:
    raise ImportError(
        "httpx is required for AsyncAPIManager. "
        "Install with: pip install api-manager[async]"
    )

from .core.config import APIManagerConfig, TimeoutConfig
from .core.exceptions import CustomError, DecodingError, ServerError
from .core.indicator import Indicator, NullIndicator, indicator_scope
from .core.logging import APIManagerLogger, request_scope
from .core.models import (
    FieldsInput,
    HTTPRequest,
    HTTPResponseEnvelope,
    MultipartSpec,
    RequestSpec,
)
from .core.multipart import generate_boundary
from .core.request_builder import build_multipart_request, build_request, resolve_url
from .core.response_handler import ResponseHandler
from .core.serializer import JSONSerializer, Serializer
from .utils.sanitizer import mask_url

T = TypeVar("T")


class AsyncTransport(ABC):
    """Базовый класс асинхронных транспортов."""

    @abstractmethod
    async def execute(self, request: HTTPRequest) -> HTTPResponseEnvelope:
        """Выполнить запрос (исключения транспорта пробрасываются как есть)."""
        pass

    async def close(self) -> None:
        pass


class HTTPXTransport(AsyncTransport):
    """
    Транспорт на базе httpx.AsyncClient.

    Клиент создаётся лениво при первом запросе.

    Example:
        >>> transport = HTTPXTransport(timeout=TimeoutConfig(connect=3, read=10))
        >>> envelope = await transport.execute(HTTPRequest("GET", "https://api.example.com"))
        >>> await transport.close()
    """

    def __init__(
        self,
        timeout: Optional[TimeoutConfig] = None,
        verify_ssl: bool = True,
        client: Optional[httpx.AsyncClient] = None,
    ):
        timeout = timeout or TimeoutConfig()
        self._timeout = httpx.Timeout(
            connect=timeout.connect,
            read=timeout.read,
            write=timeout.read,
            pool=timeout.connect,
        )
        self._verify_ssl = verify_ssl
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Получить или создать httpx клиент."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                verify=self._verify_ssl,
            )
        return self._client

    async def execute(self, request: HTTPRequest) -> HTTPResponseEnvelope:
        client = await self._get_client()
        response = await client.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            content=request.body,
        )
        return HTTPResponseEnvelope(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


class AsyncAPIManager:
    """
    Асинхронный пайплайн HTTP запросов.

    Example:
        >>> async with AsyncAPIManager() as api:
        ...     user = await api.request("https://api.example.com/users/1", "GET",
        ...                              response_type=User)
    """

    def __init__(
        self,
        config: Optional[APIManagerConfig] = None,
        transport: Optional[AsyncTransport] = None,
        serializer: Optional[Serializer] = None,
        indicator: Optional[Indicator] = None,
    ):
        self._config = config or APIManagerConfig()
        self._owns_transport = transport is None
        self._transport = transport or HTTPXTransport(
            timeout=self._config.timeout,
            verify_ssl=self._config.verify_ssl,
        )
        self._serializer = serializer or JSONSerializer()
        self._indicator = indicator or NullIndicator()
        self._logger = APIManagerLogger(self._config.logging, name="api_manager.async")

    async def __aenter__(self) -> "AsyncAPIManager":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Закрыть транспорт (если создан менеджером) и логгер."""
        if self._owns_transport:
            await self._transport.close()
        self._logger.close()

    @property
    def config(self) -> APIManagerConfig:
        return self._config

    @property
    def indicator(self) -> Indicator:
        return self._indicator

    # ==================== Пайплайн ====================

    async def send(self, spec: RequestSpec, response_type: Type[T]) -> T:
        """
        Выполнить JSON запрос и декодировать ответ.

        Ошибки - как у APIManager.send(): ошибки транспорта и сериализации
        тела приводятся к CustomError.
        """
        with request_scope(), indicator_scope(self._indicator, self._config.indicator_message):
            url = resolve_url(spec.url, self._config.base_url)
            start_time = time.time()

            try:
                request = build_request(spec, url, self._serializer, self._config.headers)
                raw_response = await self._transport.execute(request)
            except Exception as e:
                self._logger.error(
                    "Transport failure",
                    method=spec.method,
                    url=mask_url(url),
                    error=str(e),
                    error_type=e.__class__.__name__,
                )
                raise CustomError(str(e) or e.__class__.__name__) from e

            response = self._classify(raw_response, spec.method, url, start_time)

            try:
                return ResponseHandler.decode(response, self._serializer, response_type)
            except DecodingError as e:
                self._logger.error(
                    "Response decoding failed",
                    method=spec.method,
                    url=mask_url(url),
                    target_type=getattr(response_type, "__name__", str(response_type)),
                    errors=e.errors,
                    raw_body=response.text,
                )
                raise

    async def send_multipart(self, spec: MultipartSpec, response_type: Type[T]) -> T:
        """
        Выполнить multipart загрузку.

        Ошибки транспорта (httpx.HTTPError и др.) пробрасываются как есть.
        """
        with request_scope(), indicator_scope(self._indicator, self._config.indicator_message):
            url = resolve_url(spec.url, self._config.base_url)
            request = build_multipart_request(
                spec, url, generate_boundary(), self._config.headers
            )
            start_time = time.time()

            raw_response = await self._transport.execute(request)
            response = self._classify(raw_response, spec.method, url, start_time)

            try:
                return ResponseHandler.decode(response, self._serializer, response_type)
            except DecodingError:
                raise DecodingError() from None

    def _classify(
        self,
        raw_response: Any,
        method: str,
        url: str,
        start_time: float,
    ) -> HTTPResponseEnvelope:
        response = ResponseHandler.ensure_http_response(raw_response)
        duration_ms = round((time.time() - start_time) * 1000, 2)

        try:
            ResponseHandler.check_status(response, self._config.success_status_range)
        except ServerError:
            self._logger.warning(
                "Server error",
                method=method,
                url=mask_url(url),
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
            raise

        self._logger.info(
            "Request completed",
            method=method,
            url=mask_url(url),
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        return response

    # ==================== Удобные обёртки ====================

    async def request(
        self,
        url: Optional[str],
        method: str,
        response_type: Type[T],
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
    ) -> T:
        spec = RequestSpec(url=url, method=method, headers=headers or {}, body=body)
        return await self.send(spec, response_type)

    async def multipart_request(
        self,
        url: Optional[str],
        method: str,
        payload: bytes,
        response_type: Type[T],
        headers: Optional[Dict[str, str]] = None,
        fields: FieldsInput = None,
        field_name: str = "image",
        file_name: str = "image.jpg",
        mime_type: str = "image/jpeg",
    ) -> T:
        spec = MultipartSpec(
            url=url,
            method=method,
            headers=headers or {},
            fields=fields,
            payload=payload,
            field_name=field_name,
            file_name=file_name,
            mime_type=mime_type,
        )
        return await self.send_multipart(spec, response_type)
