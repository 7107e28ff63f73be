"""
Настройки логирования пайплайна.

Ровно те ручки, что выставляет load_from_env: уровень, формат,
вывод в консоль и файл с ротацией.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    JSON = "json"
    TEXT = "text"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Куда и в каком виде APIManager пишет события запросов.

    Строки для level и format принимаются в любом регистре.

    Args:
        level: Минимальный уровень записей
        format: json (одна JSON строка на запись) или text (key=value)
        console: Писать в stdout
        file_path: Файл с ротацией (None - без файла)
        static_fields: Поля, добавляемые в каждую запись (service, env)

    Examples:
        >>> LoggingConfig(level="debug", format="json")
        >>> LoggingConfig(console=False, file_path="/var/log/api.log",
        ...               static_fields={"service": "mobile-backend"})
    """
    level: Union[LogLevel, str] = LogLevel.INFO
    format: Union[LogFormat, str] = LogFormat.TEXT
    console: bool = True
    file_path: Optional[str] = None
    static_fields: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        """Приведение строк к enum и проверка, что вывод куда-то настроен."""
        object.__setattr__(self, 'level', LogLevel(self.level.upper()))
        object.__setattr__(self, 'format', LogFormat(self.format.lower()))
        object.__setattr__(self, 'static_fields', MappingProxyType(dict(self.static_fields)))

        if not self.console and not self.file_path:
            raise ValueError("LoggingConfig needs console output or a file_path")
