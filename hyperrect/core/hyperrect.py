from __future__ import annotations
import operator
from typing import Optional, Union

import numpy as np
from numpy.typing import ArrayLike

from ..config import COORD_DTYPE


class DimensionMismatchError(ValueError):
    """Размерность операнда не совпадает с размерностью бокса"""


def _as_dimension(dim) -> int:
    """Проверка размерности для конструктора и фабрик"""
    if isinstance(dim, (bool, np.bool_)) or not isinstance(dim, (int, np.integer)):
        raise ValueError(f"dimension must be an integer, got: {dim!r}")
    if dim <= 0:
        raise ValueError(f"dimension must be > 0, got: {dim}")
    return int(dim)


def _as_coords(values: ArrayLike, name: str) -> np.ndarray:
    """Копия координат в виде одномерного float64 массива"""
    coords = np.array(values, dtype=COORD_DTYPE)
    if coords.ndim != 1:
        raise ValueError(f"{name} must be a 1-D sequence, got shape {coords.shape}")
    if np.isnan(coords).any():
        raise ValueError(f"{name} contains NaN: {coords.tolist()}")
    return coords


class HyperRect:
    """
    Axis-Aligned гипер-прямоугольник в N-мерном пространстве (N >= 1)

    Задаётся минимальным и максимальным углом. Размерность фиксируется при
    создании, границы можно менять только через set_*_corner_coord, которые
    сохраняют инвариант min_corner[i] <= max_corner[i].

    Примеры:
        HyperRect(3)                    # точка (0, 0, 0)
        HyperRect([0, 5], [2, 1])       # углы упорядочиваются покомпонентно
        HyperRect.infinite(2)           # всё пространство
    """

    def __init__(self,
                 dim_or_corner: Union[int, ArrayLike],
                 other_corner: Optional[ArrayLike] = None):
        """
        Args:
            dim_or_corner: Размерность (если other_corner не задан)
                или первый угол
            other_corner: Второй угол той же длины

        Raises:
            ValueError: Размерность <= 0, углы разной длины или NaN в координатах
        """
        if other_corner is None:
            dim = _as_dimension(dim_or_corner)
            self._min_corner = np.zeros(dim, dtype=COORD_DTYPE)
            self._max_corner = np.zeros(dim, dtype=COORD_DTYPE)
            return

        corner_a = _as_coords(dim_or_corner, "corner_a")
        corner_b = _as_coords(other_corner, "corner_b")

        if corner_a.size != corner_b.size:
            raise ValueError(
                f"inconsistent dimensions: {corner_a.size} != {corner_b.size}"
            )
        if corner_a.size == 0:
            raise ValueError("dimension must be > 0, got: 0")

        # Углы не обязаны быть упорядочены, порядок восстанавливается покомпонентно
        self._min_corner = np.minimum(corner_a, corner_b)
        self._max_corner = np.maximum(corner_a, corner_b)

    @classmethod
    def infinite(cls, dim: int) -> 'HyperRect':
        """Бокс бесконечного объёма: min = -inf, max = +inf по всем осям"""
        rect = cls(dim)
        rect._min_corner.fill(-np.inf)
        rect._max_corner.fill(np.inf)
        return rect

    def clone(self) -> 'HyperRect':
        """Независимая копия (без общих массивов с оригиналом)"""
        return type(self)(self._min_corner, self._max_corner)

    def __copy__(self) -> 'HyperRect':
        return self.clone()

    def __deepcopy__(self, memo) -> 'HyperRect':
        return self.clone()

    # ============ Доступ к координатам ============

    @property
    def dimension(self) -> int:
        return int(self._min_corner.size)

    @property
    def min_corner(self) -> np.ndarray:
        """Копия минимального угла"""
        return self._min_corner.copy()

    @property
    def max_corner(self) -> np.ndarray:
        """Копия максимального угла"""
        return self._max_corner.copy()

    def get_min_corner_coord(self, n: int) -> float:
        return float(self._min_corner[self._check_index(n)])

    def get_max_corner_coord(self, n: int) -> float:
        return float(self._max_corner[self._check_index(n)])

    def set_min_corner_coord(self, n: int, value: float) -> None:
        """
        Установка координаты минимального угла

        Args:
            n: Индекс оси
            value: Новое значение (равенство с max допускается)

        Raises:
            IndexError: Индекс вне [0, dimension)
            ValueError: value > max_corner[n] или NaN; бокс не изменяется
        """
        index = self._check_index(n)
        value = self._check_value(value)
        upper = self._max_corner[index]
        if value > upper:
            raise ValueError(f"exceeds max corner coordinate: {value} > {upper}")
        self._min_corner[index] = value

    def set_max_corner_coord(self, n: int, value: float) -> None:
        """
        Установка координаты максимального угла

        Raises:
            IndexError: Индекс вне [0, dimension)
            ValueError: value < min_corner[n] или NaN; бокс не изменяется
        """
        index = self._check_index(n)
        value = self._check_value(value)
        lower = self._min_corner[index]
        if value < lower:
            raise ValueError(f"less than min corner coordinate: {value} < {lower}")
        self._max_corner[index] = value

    # ============ Размеры ============

    def widths(self) -> np.ndarray:
        """Ширина по каждой оси (max - min), при переполнении inf"""
        with np.errstate(over="ignore"):
            return self._max_corner - self._min_corner

    def center(self) -> np.ndarray:
        """Центр бокса"""
        return (self._min_corner + self._max_corner) / 2.0

    def volume(self) -> float:
        """
        Объём: произведение ширин по всем осям

        Произведение начинается с 1.0, поэтому вырожденный бокс (хотя бы одна
        нулевая ширина) даёт 0.0, а бокс с положительными ширинами - объём > 0.
        """
        return float(np.prod(self.widths()))

    def is_point(self) -> bool:
        """Совпадают ли углы (точное сравнение, без допуска)"""
        return bool(np.array_equal(self._min_corner, self._max_corner))

    def dimension_of_min_width(self) -> int:
        """Индекс оси с наименьшей шириной (при равенстве - первая)"""
        widths = self.widths()
        best_dim = 0
        best_width = widths[0]
        for d in range(1, widths.size):
            if widths[d] < best_width:
                best_width = widths[d]
                best_dim = d
        return best_dim

    def dimension_of_max_width(self) -> int:
        """Индекс оси с наибольшей шириной (при равенстве - первая)"""
        widths = self.widths()
        best_dim = 0
        best_width = widths[0]
        for d in range(1, widths.size):
            if widths[d] > best_width:
                best_width = widths[d]
                best_dim = d
        return best_dim

    # ============ Геометрические запросы ============

    def contains(self, point: ArrayLike) -> bool:
        """Лежит ли точка внутри бокса или на его границе"""
        p = self._as_point(point)
        return bool(np.all((p >= self._min_corner) & (p <= self._max_corner)))

    def closest_point(self, point: ArrayLike) -> np.ndarray:
        """
        Ближайшая к point точка бокса (внутри или на поверхности)

        Координаты зажимаются в [min, max] по каждой оси. Для точки внутри
        бокса возвращается её копия.
        """
        p = self._as_point(point)
        return np.clip(p, self._min_corner, self._max_corner)

    def intersects_with(self, other: 'HyperRect') -> bool:
        """
        Пересекаются ли боксы

        Пересечение должно иметь ненулевую ширину по каждой оси: боксы,
        касающиеся только границей, не пересекаются.
        """
        self._check_other(other)
        lower = np.maximum(self._min_corner, other._min_corner)
        upper = np.minimum(self._max_corner, other._max_corner)
        return bool(np.all(lower < upper))

    def intersection_with(self, other: 'HyperRect') -> Optional['HyperRect']:
        """
        Пересечение с другим боксом

        Returns:
            Новый бокс или None, если intersects_with(other) ложно
        """
        self._check_other(other)
        lower = np.maximum(self._min_corner, other._min_corner)
        upper = np.minimum(self._max_corner, other._max_corner)
        if not np.all(lower < upper):
            return None
        return type(self)(lower, upper)

    # ============ Сравнение ============

    def __eq__(self, other):
        if not isinstance(other, HyperRect):
            return NotImplemented
        return (self.dimension == other.dimension
                and np.array_equal(self._min_corner, other._min_corner)
                and np.array_equal(self._max_corner, other._max_corner))

    # Границы изменяемые
    __hash__ = None

    def __repr__(self) -> str:
        return (f"HyperRect(min={self._min_corner.tolist()}, "
                f"max={self._max_corner.tolist()})")

    # ============ Проверки ============

    def _check_index(self, n: int) -> int:
        if isinstance(n, (bool, np.bool_)):
            raise TypeError(f"dimension index must be an integer, got: {n!r}")
        try:
            index = operator.index(n)
        except TypeError:
            raise TypeError(f"dimension index must be an integer, got: {n!r}") from None
        if not 0 <= index < self.dimension:
            raise IndexError(
                f"dimension index out of range: {index} not in [0, {self.dimension})"
            )
        return index

    @staticmethod
    def _check_value(value: float) -> float:
        value = float(value)
        if np.isnan(value):
            raise ValueError("corner coordinate must not be NaN")
        return value

    def _check_dimension(self, dim: int) -> None:
        if dim != self.dimension:
            raise DimensionMismatchError(
                f"wrong number of dimensions: {dim} != {self.dimension}"
            )

    def _check_other(self, other) -> None:
        if not isinstance(other, HyperRect):
            raise TypeError(f"expected HyperRect, got: {type(other).__name__}")
        self._check_dimension(other.dimension)

    def _as_point(self, point: ArrayLike) -> np.ndarray:
        p = np.array(point, dtype=COORD_DTYPE)
        if p.ndim != 1:
            raise DimensionMismatchError(
                f"point must be a 1-D sequence, got shape {p.shape}"
            )
        self._check_dimension(p.size)
        return p
