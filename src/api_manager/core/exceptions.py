"""
Иерархия исключений API Manager.

Закрытый набор ошибок пайплайна запросов:
- InvalidURLError - URL отсутствует или не является абсолютным http(s) URL
- InvalidResponseError - транспорт вернул ответ не HTTP формы
- DecodingError - тело ответа не удалось декодировать в запрошенный тип
- ServerError - статус код вне диапазона успешных
- CustomError - нормализованная ошибка транспорта
"""

from typing import Any, List, Optional


class APIError(Exception):
    """Базовое исключение API Manager."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidURLError(APIError):
    """
    URL отсутствует или невалиден.

    Args:
        url: Исходное значение URL (может быть None)
    """

    def __init__(self, url: Optional[str] = None):
        self.url = url
        super().__init__("Invalid URL")


class InvalidResponseError(APIError):
    """Транспорт вернул объект, который не является HTTP ответом."""

    def __init__(self, message: str = "Invalid server response"):
        super().__init__(message)


class DecodingError(APIError):
    """
    Ошибка декодирования тела ответа.

    Args:
        errors: Структурированные ошибки валидации (если есть)
        target_type: Тип, в который декодировали
    """

    def __init__(
        self,
        errors: Optional[List[Any]] = None,
        target_type: Optional[Any] = None,
    ):
        self.errors = errors or []
        self.target_type = target_type
        super().__init__("Failed to decode response")


class ServerError(APIError):
    """
    Статус код вне диапазона успешных.

    Args:
        status_code: HTTP статус код
    """

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Server error: {status_code}")


class CustomError(APIError):
    """Ошибка с произвольным сообщением (нормализованные ошибки транспорта)."""
    pass
