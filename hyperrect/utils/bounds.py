"""
Охватывающие боксы для облаков точек и наборов боксов
"""
import numpy as np
from typing import Iterable, Optional
import logging

from numpy.typing import ArrayLike

from ..config import COORD_DTYPE, PartitionConfig
from ..core.hyperrect import HyperRect, DimensionMismatchError

logger = logging.getLogger(__name__)


def bounding_hyper_rect(points: ArrayLike,
                        config: Optional[PartitionConfig] = None) -> HyperRect:
    """
    Наименьший бокс, содержащий все точки

    Args:
        points: Облако точек (M x N); одномерный массив - одна точка
        config: Параметры отступов (padding_fraction, min_padding),
            по умолчанию PartitionConfig() - без отступа

    Returns:
        HyperRect размерности N

    Raises:
        ValueError: Пустое облако, некорректная конфигурация
            или нечисловые координаты
    """
    config = config or PartitionConfig()
    config.validate()

    pts = np.asarray(points, dtype=COORD_DTYPE)
    if pts.ndim == 1:
        pts = pts.reshape(1, -1)

    if pts.ndim != 2 or pts.shape[0] == 0 or pts.shape[1] == 0:
        raise ValueError(f"points must be a non-empty (M x N) array, got shape {pts.shape}")

    if not np.all(np.isfinite(pts)):
        raise ValueError("points contain NaN or infinite coordinates")

    minimum = pts.min(axis=0)
    maximum = pts.max(axis=0)

    # Отступ пропорционален ширине, но не меньше min_padding
    span = maximum - minimum
    padding = np.maximum(span * config.padding_fraction, config.min_padding)

    rect = HyperRect(minimum - padding, maximum + padding)
    logger.debug(f"Bounding box of {pts.shape[0]} points: {rect}")
    return rect


def enclosing_hyper_rect(rects: Iterable[HyperRect]) -> HyperRect:
    """
    Наименьший бокс, содержащий все переданные боксы

    Raises:
        ValueError: Пустой набор
        DimensionMismatchError: Боксы разной размерности
    """
    rects = list(rects)
    if not rects:
        raise ValueError("at least one HyperRect is required")

    for rect in rects:
        if not isinstance(rect, HyperRect):
            raise TypeError(f"expected HyperRect, got: {type(rect).__name__}")

    dim = rects[0].dimension
    for rect in rects[1:]:
        if rect.dimension != dim:
            raise DimensionMismatchError(
                f"wrong number of dimensions: {rect.dimension} != {dim}"
            )

    lower = np.min([rect.min_corner for rect in rects], axis=0)
    upper = np.max([rect.max_corner for rect in rects], axis=0)
    return HyperRect(lower, upper)
