# src/api_manager/core/api_manager.py
from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import urlparse
import threading
import time

from .config import APIManagerConfig
from .exceptions import CustomError, DecodingError, ServerError
from .indicator import Indicator, NullIndicator, indicator_scope
from .logging import APIManagerLogger
from .logging.filters import request_scope
from .models import FieldsInput, HTTPResponseEnvelope, MultipartSpec, RequestSpec
from .multipart import generate_boundary
from .request_builder import build_multipart_request, build_request, resolve_url
from .response_handler import ResponseHandler
from .serializer import JSONSerializer, Serializer
from .transport import RequestsTransport, Transport
from ..utils.sanitizer import mask_url

T = TypeVar("T")


def _logger_name(config: APIManagerConfig) -> str:
    """Имя логгера: api_manager или api_manager.<host> при наличии base_url."""
    if config.logging and config.base_url:
        host = urlparse(config.base_url).netloc
        if host:
            return f"api_manager.{host}"
    return "api_manager"


class APIManager:
    """
    Пайплайн HTTP запросов с типизированным декодированием ответа.

    Собирает запрос, отправляет его через транспорт, классифицирует статус,
    декодирует тело в запрошенный тип и приводит ошибки к таксономии
    APIError. Между вызовами состояния не хранит.

    Features:
        - JSON запросы (send) и multipart загрузки (send_multipart)
        - Декодирование в любой тип, поддерживаемый pydantic
        - Индикатор загрузки, передаваемый явно
        - Подменяемые транспорт и сериализатор

    Example:
        >>> from pydantic import BaseModel
        >>> class User(BaseModel):
        ...     id: int
        ...     name: str
        >>> with APIManager(config=APIManagerConfig(base_url="https://api.example.com")) as api:
        ...     user = api.request("/users/1", "GET", response_type=User)
    """

    def __init__(
        self,
        config: Optional[APIManagerConfig] = None,
        transport: Optional[Transport] = None,
        serializer: Optional[Serializer] = None,
        indicator: Optional[Indicator] = None,
    ):
        """
        Args:
            config: APIManagerConfig (по умолчанию - дефолтный)
            transport: Транспорт (по умолчанию RequestsTransport из config)
            serializer: Сериализатор (по умолчанию JSONSerializer)
            indicator: Индикатор загрузки (по умолчанию NullIndicator)
        """
        self._config = config or APIManagerConfig()
        self._owns_transport = transport is None
        self._transport = transport or RequestsTransport(
            timeout=self._config.timeout,
            verify_ssl=self._config.verify_ssl,
        )
        self._serializer = serializer or JSONSerializer()
        self._indicator = indicator or NullIndicator()
        self._logger = APIManagerLogger(self._config.logging, name=_logger_name(self._config))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """Закрывает транспорт (если создан менеджером) и логгер."""
        if self._owns_transport:
            self._transport.close()
        self._logger.close()

    # ==================== Свойства ====================

    @property
    def config(self) -> APIManagerConfig:
        return self._config

    @property
    def indicator(self) -> Indicator:
        return self._indicator

    @property
    def transport(self) -> Transport:
        return self._transport

    # ==================== Пайплайн ====================

    def send(self, spec: RequestSpec, response_type: Type[T]) -> T:
        """
        Выполнить JSON запрос и декодировать ответ.

        Args:
            spec: Описание запроса
            response_type: Тип результата

        Returns:
            Декодированное значение response_type

        Raises:
            InvalidURLError: URL отсутствует или невалиден (без сетевых вызовов)
            CustomError: Ошибка транспорта или сериализации тела
            InvalidResponseError: Транспорт вернул не HTTP ответ
            ServerError: Статус вне success_status_range
            DecodingError: Тело не соответствует response_type
        """
        with request_scope(), indicator_scope(self._indicator, self._config.indicator_message):
            url = resolve_url(spec.url, self._config.base_url)
            self._logger.debug(
                "Request started",
                method=spec.method,
                url=mask_url(url),
                has_body=spec.body is not None,
            )
            start_time = time.time()

            try:
                request = build_request(spec, url, self._serializer, self._config.headers)
                raw_response = self._transport.execute(request)
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

    def send_multipart(self, spec: MultipartSpec, response_type: Type[T]) -> T:
        """
        Выполнить multipart/form-data загрузку и декодировать ответ.

        В отличие от send(), ошибки транспорта пробрасываются как есть
        (без оборачивания в CustomError), а ошибка декодирования - это
        DecodingError без структурированных деталей.

        Raises:
            InvalidURLError: URL отсутствует или невалиден
            InvalidResponseError: Транспорт вернул не HTTP ответ
            ServerError: Статус вне success_status_range
            DecodingError: Тело не соответствует response_type
        """
        with request_scope(), indicator_scope(self._indicator, self._config.indicator_message):
            url = resolve_url(spec.url, self._config.base_url)
            boundary = generate_boundary()
            request = build_multipart_request(spec, url, boundary, self._config.headers)
            self._logger.debug(
                "Multipart request started",
                method=spec.method,
                url=mask_url(url),
                field_count=len(spec.fields),
                payload_size=len(spec.payload),
            )
            start_time = time.time()

            raw_response = self._transport.execute(request)
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
        """Проверить форму ответа и статус, залогировать завершение."""
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
            response_size=len(response.content),
        )
        return response

    # ==================== Удобные обёртки ====================

    def request(
        self,
        url: Optional[str],
        method: str,
        response_type: Type[T],
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
    ) -> T:
        """
        Выполнить JSON запрос.

        Example:
            >>> api.request("https://api.example.com/login", "POST",
            ...             response_type=LoginResponse,
            ...             body={"email": "a@b.co", "password": "Abcdefg1"})
        """
        spec = RequestSpec(url=url, method=method, headers=headers or {}, body=body)
        return self.send(spec, response_type)

    def multipart_request(
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
        """
        Загрузить файл multipart/form-data запросом.

        Example:
            >>> with open("avatar.jpg", "rb") as f:
            ...     api.multipart_request("https://api.example.com/avatar", "POST",
            ...                           payload=f.read(), response_type=UploadResult,
            ...                           fields={"user_id": "42"})
        """
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
        return self.send_multipart(spec, response_type)


# ==================== Общий экземпляр ====================

_shared_manager: Optional[APIManager] = None
_shared_lock = threading.Lock()


def get_shared_manager() -> APIManager:
    """
    Получить общий экземпляр APIManager.

    Создаётся лениво с конфигурацией по умолчанию.

    Example:
        >>> api = get_shared_manager()
        >>> api is get_shared_manager()
        True
    """
    global _shared_manager

    with _shared_lock:
        if _shared_manager is None:
            _shared_manager = APIManager()
        return _shared_manager


def set_shared_manager(manager: Optional[APIManager]) -> None:
    """
    Заменить общий экземпляр (None - сбросить).

    Предыдущий экземпляр не закрывается.
    """
    global _shared_manager

    with _shared_lock:
        _shared_manager = manager
