"""Immutable per-call request and response values."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from requests.structures import CaseInsensitiveDict


FieldsInput = Union[Mapping[str, str], Iterable[Tuple[str, str]], None]


def _freeze_headers(headers: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    if headers is None:
        return MappingProxyType({})
    return MappingProxyType(dict(headers))


def _normalize_fields(fields: FieldsInput) -> Tuple[Tuple[str, str], ...]:
    """
    Привести поля формы к упорядоченному кортежу пар.

    Mapping сохраняет порядок вставки, последовательность пар - свой порядок.
    """
    if fields is None:
        return ()
    if isinstance(fields, Mapping):
        items = fields.items()
    else:
        items = fields
    return tuple((str(key), str(value)) for key, value in items)


@dataclass(frozen=True)
class RequestSpec:
    """
    Описание JSON запроса.

    Attributes:
        url: Целевой URL (None - ошибка вызывающего, а не падение)
        method: HTTP метод, передаётся как есть
        headers: Заголовки вызова, перекрывают автоматические
        body: Сериализуемое значение тела (None - без тела)

    Example:
        >>> RequestSpec(url="https://api.example.com/users", method="POST",
        ...             body={"name": "alice"})
    """
    url: Optional[str]
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    body: Any = None

    def __post_init__(self):
        object.__setattr__(self, 'headers', _freeze_headers(self.headers))


@dataclass(frozen=True)
class MultipartSpec:
    """
    Описание multipart/form-data загрузки.

    Attributes:
        url: Целевой URL
        method: HTTP метод
        headers: Заголовки вызова, могут перекрыть Content-Type
        fields: Текстовые поля формы (в порядке передачи)
        payload: Бинарные данные файла
        field_name: Имя поля для файла
        file_name: Имя файла
        mime_type: MIME тип файла
    """
    url: Optional[str]
    method: str = "POST"
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    fields: Tuple[Tuple[str, str], ...] = ()
    payload: bytes = b""
    field_name: str = "image"
    file_name: str = "image.jpg"
    mime_type: str = "image/jpeg"

    def __post_init__(self):
        object.__setattr__(self, 'headers', _freeze_headers(self.headers))
        object.__setattr__(self, 'fields', _normalize_fields(self.fields))
        if not isinstance(self.payload, (bytes, bytearray, memoryview)):
            raise TypeError("payload must be bytes-like")
        object.__setattr__(self, 'payload', bytes(self.payload))


@dataclass(frozen=True)
class HTTPRequest:
    """Prepared request handed to a transport."""
    method: str
    url: str
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: Optional[bytes] = None


@dataclass(frozen=True)
class HTTPResponseEnvelope:
    """Status code and raw body produced by a transport."""
    status_code: int
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")
