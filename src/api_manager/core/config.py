"""
Система конфигурации для API Manager.

Все конфиги immutable (frozen dataclasses) для потокобезопасности.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .logging import LoggingConfig

# Диапазон статусов, тело которых декодируется (включительно).
# 400-404 сюда тоже входят: такие ответы декодируются, а не считаются ошибкой.
DEFAULT_SUCCESS_STATUS_RANGE: Tuple[int, int] = (200, 404)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов транспорта.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения данных (сек)

    Examples:
        >>> TimeoutConfig(connect=5, read=30)
    """
    connect: float = 5
    read: float = 30

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ValueError("connect timeout must be positive")
        if self.read <= 0:
            raise ValueError("read timeout must be positive")

    def as_tuple(self) -> Tuple[float, float]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MAIN CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class APIManagerConfig:
    """
    Главная конфигурация APIManager.

    Args:
        base_url: Базовый URL для относительных путей (опционально)
        headers: Заголовки по умолчанию (перекрываются автоматическими и заголовками вызова)
        timeout: Конфигурация таймаутов
        verify_ssl: Проверять SSL сертификаты
        success_status_range: Включительный диапазон статусов, тело которых декодируется
        indicator_message: Сообщение для индикатора загрузки
        logging: Конфигурация логирования (None = стандартный logging модуль)

    Examples:
        >>> config = APIManagerConfig(base_url="https://api.example.com")
        >>> config = APIManagerConfig.create(timeout=60, headers={"X-App": "ios"})
    """
    base_url: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    verify_ssl: bool = True
    success_status_range: Tuple[int, int] = DEFAULT_SUCCESS_STATUS_RANGE
    indicator_message: Optional[str] = None
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Валидация и заморозка изменяемых полей."""
        if isinstance(self.headers, dict):
            object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

        if self.base_url:
            normalized = self.base_url.rstrip('/')
            if normalized != self.base_url:
                object.__setattr__(self, 'base_url', normalized)

        low, high = self.success_status_range
        if low > high:
            raise ValueError("success_status_range lower bound must not exceed upper bound")
        if low < 100 or high > 599:
            raise ValueError("success_status_range must be within 100-599")

    @classmethod
    def create(
        cls,
        base_url: Optional[str] = None,
        timeout: Union[float, Tuple[float, float], TimeoutConfig] = 30,
        verify_ssl: bool = True,
        headers: Optional[Dict[str, str]] = None,
        logging: Optional['LoggingConfig'] = None,
        **kwargs
    ) -> 'APIManagerConfig':
        """
        Удобный конструктор конфигурации.

        Args:
            base_url: Базовый URL
            timeout: Таймаут (число, (connect, read) или TimeoutConfig)
            verify_ssl: Проверять SSL
            headers: Заголовки по умолчанию
            logging: Конфигурация логирования

        Examples:
            >>> config = APIManagerConfig.create(timeout=(3, 60))
        """
        if isinstance(timeout, TimeoutConfig):
            timeout_cfg = timeout
        elif isinstance(timeout, tuple):
            timeout_cfg = TimeoutConfig(connect=timeout[0], read=timeout[1])
        else:
            timeout_cfg = TimeoutConfig(read=timeout)

        return cls(
            base_url=base_url,
            headers=headers or {},
            timeout=timeout_cfg,
            verify_ssl=verify_ssl,
            logging=logging,
            **kwargs
        )

    def with_headers(self, headers: Dict[str, str]) -> 'APIManagerConfig':
        """
        Создать новый конфиг с дополнительными заголовками.

        Example:
            >>> new_config = config.with_headers({"Authorization": "Bearer token"})
        """
        merged = dict(self.headers)
        merged.update(headers)

        return APIManagerConfig(
            base_url=self.base_url,
            headers=merged,
            timeout=self.timeout,
            verify_ssl=self.verify_ssl,
            success_status_range=self.success_status_range,
            indicator_message=self.indicator_message,
            logging=self.logging,
        )
