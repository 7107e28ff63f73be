# src/api_manager/core/response_handler.py

from typing import Any, Tuple, Type, TypeVar

from .exceptions import InvalidResponseError, ServerError
from .models import HTTPResponseEnvelope
from .serializer import Serializer

T = TypeVar("T")


class ResponseHandler:
    """Классификация и декодирование ответов транспорта"""

    @staticmethod
    def ensure_http_response(response: Any) -> HTTPResponseEnvelope:
        """Проверяет, что транспорт вернул HTTP ответ"""

        if not isinstance(response, HTTPResponseEnvelope):
            raise InvalidResponseError()

        status_code = response.status_code
        if isinstance(status_code, bool) or not isinstance(status_code, int):
            raise InvalidResponseError()

        return response

    @staticmethod
    def check_status(response: HTTPResponseEnvelope, success_range: Tuple[int, int]) -> None:
        """
        Статус в success_range (включительно) - тело декодируется.
        Любой другой статус - ServerError.
        """

        low, high = success_range
        if not low <= response.status_code <= high:
            raise ServerError(response.status_code)

    @staticmethod
    def decode(response: HTTPResponseEnvelope, serializer: Serializer, response_type: Type[T]) -> T:
        """Декодирует тело ответа в response_type (DecodingError при ошибке)"""

        return serializer.decode(response.content, response_type)
