"""Scale Registry — process-wide default scale для фасада APC.

Единственное разделяемое изменяемое состояние системы:
- Значение по умолчанию читается из переменной окружения APCMATH_SCALE
  при первом обращении (аналог настройки bcmath.scale)
- При отсутствии переменной используется ScaleConfig.default_scale
- Доступ защищён threading.Lock

Движок никогда не обращается к реестру: scale всегда передаётся явно.
"""

import logging
import os
import threading
from dataclasses import dataclass
from typing import Optional

from apcmath.core.math import validate_scale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaleConfig:
    """Конфигурация реестра scale.

    default_scale — значение, если переменная окружения не задана.
    env_var — имя переменной окружения с начальным scale.
    """
    default_scale: int = 0
    env_var: str = "APCMATH_SCALE"


class ScaleRegistry:
    """Хранилище scale по умолчанию.

    Значение инициализируется лениво: переменная окружения читается
    при первом get()/resolve(), а не при создании реестра.
    """

    def __init__(self, config: Optional[ScaleConfig] = None):
        """
        Args:
            config: конфигурация (default: ScaleConfig())
        """
        self.config = config or ScaleConfig()
        validate_scale(self.config.default_scale)

        self._scale: Optional[int] = None
        self._lock = threading.Lock()

    def _initial_scale(self) -> int:
        raw = os.environ.get(self.config.env_var)
        if raw is None or raw.strip() == "":
            return self.config.default_scale

        try:
            return validate_scale(int(raw.strip()))
        except ValueError as e:
            raise ValueError(
                f"{self.config.env_var} must be a non-negative integer, got {raw!r}"
            ) from e

    def get(self) -> int:
        """Текущий scale по умолчанию."""
        with self._lock:
            if self._scale is None:
                self._scale = self._initial_scale()
                logger.debug("Default scale initialized to %d", self._scale)
            return self._scale

    def set(self, scale: int) -> int:
        """Установка scale по умолчанию.

        Raises:
            ValueError: Если scale не неотрицательное целое
        """
        validate_scale(scale)
        with self._lock:
            previous = self._scale
            self._scale = scale
        logger.debug("Default scale changed: %s -> %d", previous, scale)
        return scale

    def resolve(self, scale: Optional[int] = None) -> int:
        """Явный scale, если передан, иначе scale по умолчанию."""
        if scale is None:
            return self.get()
        return validate_scale(scale)

    def reset(self) -> None:
        """Сброс: следующее обращение снова прочитает окружение."""
        with self._lock:
            self._scale = None


# Глобальный реестр фасада
DEFAULT_REGISTRY = ScaleRegistry()
