"""
multipart/form-data кодировщик.

Чистые функции без I/O: генерация boundary и сборка тела запроса
по соглашениям RFC 2046.
"""

import uuid
from typing import Iterable, Tuple

CRLF = "\r\n"


def generate_boundary() -> str:
    """
    Сгенерировать уникальный boundary для одного запроса.

    Returns:
        UUID4 строка

    Example:
        >>> boundary = generate_boundary()
        >>> len(boundary)
        36
    """
    return str(uuid.uuid4())


def multipart_content_type(boundary: str) -> str:
    """Значение заголовка Content-Type для multipart тела."""
    return f"multipart/form-data; boundary={boundary}"


def encode_multipart_body(
    boundary: str,
    fields: Iterable[Tuple[str, str]],
    payload: bytes,
    field_name: str,
    file_name: str,
    mime_type: str,
) -> bytes:
    """
    Собрать multipart/form-data тело.

    Текстовые части кодируются в UTF-8, payload вставляется как есть
    (без base64 и экранирования).

    Args:
        boundary: Разделитель частей
        fields: Упорядоченные пары (имя, значение) текстовых полей
        payload: Бинарные данные файла
        field_name: Имя поля файла
        file_name: Имя файла
        mime_type: MIME тип файла

    Returns:
        Байты тела запроса

    Example:
        >>> body = encode_multipart_body("b", [("name", "a")], b"\\x00", "image", "x.jpg", "image/jpeg")
        >>> body.endswith(b"--b--\\r\\n")
        True
    """
    body = bytearray()

    for key, value in fields:
        body += f"--{boundary}{CRLF}".encode("utf-8")
        body += f'Content-Disposition: form-data; name="{key}"{CRLF}{CRLF}'.encode("utf-8")
        body += f"{value}{CRLF}".encode("utf-8")

    body += f"--{boundary}{CRLF}".encode("utf-8")
    body += (
        f'Content-Disposition: form-data; name="{field_name}"; '
        f'filename="{file_name}"{CRLF}'
    ).encode("utf-8")
    body += f"Content-Type: {mime_type}{CRLF}{CRLF}".encode("utf-8")
    body += payload
    body += CRLF.encode("utf-8")

    body += f"--{boundary}--{CRLF}".encode("utf-8")
    return bytes(body)
