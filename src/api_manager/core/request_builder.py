# src/api_manager/core/request_builder.py
"""
Построение HTTPRequest из RequestSpec / MultipartSpec.

Общая логика для APIManager и AsyncAPIManager: разрешение URL,
наложение заголовков и сборка тела.
"""

from typing import Mapping, Optional
from urllib.parse import urljoin, urlparse

from requests.structures import CaseInsensitiveDict

from .exceptions import InvalidURLError
from .models import HTTPRequest, MultipartSpec, RequestSpec
from .multipart import encode_multipart_body, multipart_content_type
from .serializer import Serializer


def resolve_url(url: Optional[str], base_url: Optional[str] = None) -> str:
    """
    Разрешить URL запроса.

    Относительный путь склеивается с base_url. Результат должен быть
    абсолютным http(s) URL с хостом.

    Raises:
        InvalidURLError: URL отсутствует или невалиден

    Examples:
        >>> resolve_url("/users", "https://api.example.com")
        'https://api.example.com/users'
        >>> resolve_url(None)
        Traceback (most recent call last):
        ...
        api_manager.core.exceptions.InvalidURLError: Invalid URL
    """
    if not url:
        raise InvalidURLError(url)

    full_url = url
    if base_url and not url.startswith(("http://", "https://")):
        full_url = urljoin(base_url.rstrip("/") + "/", url.lstrip("/"))

    try:
        parsed = urlparse(full_url)
    except ValueError:
        raise InvalidURLError(url) from None

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidURLError(url)

    return full_url


def layer_headers(*layers: Optional[Mapping[str, str]]) -> CaseInsensitiveDict:
    """
    Наложить слои заголовков, последующие перекрывают предыдущие.

    Сравнение имён регистронезависимое: "content-type" из вызова
    заменяет автоматический "Content-Type".
    """
    headers = CaseInsensitiveDict()
    for layer in layers:
        if layer:
            for name, value in layer.items():
                headers[name] = value
    return headers


def build_request(
    spec: RequestSpec,
    url: str,
    serializer: Serializer,
    default_headers: Optional[Mapping[str, str]] = None,
) -> HTTPRequest:
    """
    Собрать JSON запрос.

    Ошибка сериализации тела пробрасывается как есть.
    """
    body = None
    automatic = {}
    if spec.body is not None:
        body = serializer.encode(spec.body)
        automatic["Content-Type"] = serializer.content_type

    return HTTPRequest(
        method=spec.method,
        url=url,
        headers=layer_headers(default_headers, automatic, spec.headers),
        body=body,
    )


def build_multipart_request(
    spec: MultipartSpec,
    url: str,
    boundary: str,
    default_headers: Optional[Mapping[str, str]] = None,
) -> HTTPRequest:
    """Собрать multipart/form-data запрос с заданным boundary."""
    body = encode_multipart_body(
        boundary=boundary,
        fields=spec.fields,
        payload=spec.payload,
        field_name=spec.field_name,
        file_name=spec.file_name,
        mime_type=spec.mime_type,
    )
    automatic = {"Content-Type": multipart_content_type(boundary)}

    return HTTPRequest(
        method=spec.method,
        url=url,
        headers=layer_headers(default_headers, automatic, spec.headers),
        body=body,
    )
