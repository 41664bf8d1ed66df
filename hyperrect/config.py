"""
Конфигурация и константы для работы с гипер-прямоугольниками
"""
from dataclasses import dataclass, fields
from typing import Any, Dict

import numpy as np

# ============ КОНСТАНТЫ ============

# Хранение координат
COORD_DTYPE = np.float64  # Тип координат углов

# Разбиение
DEFAULT_SPLIT_FRACTION = 0.5  # Положение плоскости разреза по умолчанию (середина оси)
DEFAULT_MIN_SPLIT_WIDTH = 0.0  # Ось уже этой ширины не разбивается

# Охватывающие боксы
DEFAULT_PADDING_FRACTION = 0.0  # Доля ширины, добавляемая с каждой стороны
DEFAULT_MIN_PADDING = 0.0  # Минимальный отступ (в единицах координат)


@dataclass
class PartitionConfig:
    """Параметры разбиения и построения охватывающих боксов"""

    # ======== Разбиение ========
    split_fraction: float = DEFAULT_SPLIT_FRACTION
    min_split_width: float = DEFAULT_MIN_SPLIT_WIDTH

    # ======== Отступы ========
    padding_fraction: float = DEFAULT_PADDING_FRACTION
    min_padding: float = DEFAULT_MIN_PADDING

    def validate(self) -> None:
        """Проверка корректности конфигурации"""
        if not 0.0 <= self.split_fraction <= 1.0:
            raise ValueError(
                f"split_fraction must be in [0, 1], got: {self.split_fraction}"
            )

        if not self.min_split_width >= 0.0:
            raise ValueError(
                f"min_split_width must be >= 0, got: {self.min_split_width}"
            )

        if not self.padding_fraction >= 0.0:
            raise ValueError(
                f"padding_fraction must be >= 0, got: {self.padding_fraction}"
            )

        if not self.min_padding >= 0.0:
            raise ValueError(f"min_padding must be >= 0, got: {self.min_padding}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PartitionConfig':
        """Создание конфигурации из словаря (неизвестные ключи - ошибка)"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        config = cls(**data)
        config.validate()
        return config
