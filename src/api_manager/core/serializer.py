"""
Serializer capability for request bodies and response decoding.

The pipeline depends only on ``encode(value) -> bytes`` and
``decode(data, target_type) -> value``. ``JSONSerializer`` implements both
with pydantic, so any type pydantic can validate (models, dataclasses,
TypedDicts, ``List[...]``, ``Dict[...]``, primitives) is a valid decode target.
"""

from abc import ABC, abstractmethod
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodingError

T = TypeVar("T")

_ANY_ADAPTER: TypeAdapter = TypeAdapter(Any)


class Serializer(ABC):
    """Базовый класс сериализаторов."""

    content_type: str = "application/json"

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        """Сериализовать значение тела запроса."""
        pass

    @abstractmethod
    def decode(self, data: bytes, target_type: Type[T]) -> T:
        """
        Декодировать байты ответа в target_type.

        Raises:
            DecodingError: Если данные не соответствуют типу
        """
        pass


class JSONSerializer(Serializer):
    """
    JSON сериализатор на базе pydantic.

    Example:
        >>> from pydantic import BaseModel
        >>> class User(BaseModel):
        ...     id: int
        >>> JSONSerializer().decode(b'{"id": 1}', User)
        User(id=1)
    """

    def encode(self, value: Any) -> bytes:
        # Any-адаптер сериализует по фактическому типу (модели, dataclasses, dict)
        return _ANY_ADAPTER.dump_json(value)

    def decode(self, data: bytes, target_type: Type[T]) -> T:
        try:
            return TypeAdapter(target_type).validate_json(data)
        except ValidationError as e:
            raise DecodingError(
                errors=e.errors(include_url=False, include_input=False),
                target_type=target_type,
            ) from e
