# src/api_manager/core/indicator.py
"""
Индикатор загрузки, передаваемый в APIManager.

Индикатор - внешняя fire-and-forget способность (спиннер UI, прогресс в
терминале и т.п.). Флаг ``enabled`` хранится на самом объекте индикатора,
а не в глобальном состоянии.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

logger = logging.getLogger(__name__)


class Indicator(ABC):
    """
    Базовый класс индикаторов загрузки.

    Attributes:
        enabled: Показывать ли индикатор. Читается один раз в начале вызова.

    Example:
        >>> class SpinnerIndicator(Indicator):
        ...     def show(self, message=None):
        ...         spinner.start(message)
        ...
        ...     def hide(self):
        ...         spinner.stop()
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    @abstractmethod
    def show(self, message: Optional[str] = None) -> None:
        """Показать индикатор (опционально с сообщением)."""
        pass

    @abstractmethod
    def hide(self) -> None:
        """Скрыть индикатор."""
        pass


class NullIndicator(Indicator):
    """Индикатор, который ничего не делает."""

    def __init__(self):
        super().__init__(enabled=False)

    def show(self, message: Optional[str] = None) -> None:
        pass

    def hide(self) -> None:
        pass


class CallbackIndicator(Indicator):
    """
    Индикатор поверх пары колбэков.

    Удобно для подключения внешнего UI без наследования.

    Example:
        >>> indicator = CallbackIndicator(on_show=hud.show, on_hide=hud.dismiss)
        >>> manager = APIManager(indicator=indicator)
    """

    def __init__(
        self,
        on_show: Callable[[Optional[str]], None],
        on_hide: Callable[[], None],
        enabled: bool = True,
    ):
        super().__init__(enabled=enabled)
        self._on_show = on_show
        self._on_hide = on_hide

    def show(self, message: Optional[str] = None) -> None:
        self._on_show(message)

    def hide(self) -> None:
        self._on_hide()


@contextmanager
def indicator_scope(
    indicator: Optional[Indicator],
    message: Optional[str] = None,
) -> Iterator[None]:
    """
    Показать индикатор на время вызова и гарантированно скрыть его.

    show() вызывается не более одного раза до входа в блок, hide() ровно
    один раз на любом выходе из блока, включая исключения. Если индикатор
    выключен, не вызывается ни то, ни другое. Ошибки самого индикатора
    логируются и не меняют результат вызова.
    """
    if indicator is None or not indicator.enabled:
        yield
        return

    try:
        indicator.show(message)
    except Exception as e:
        logger.warning(
            "Indicator show failed",
            extra={"indicator": indicator.__class__.__name__, "error": str(e)}
        )

    try:
        yield
    finally:
        try:
            indicator.hide()
        except Exception as e:
            logger.warning(
                "Indicator hide failed",
                extra={"indicator": indicator.__class__.__name__, "error": str(e)}
            )
