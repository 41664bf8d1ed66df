import logging
from typing import Optional, Tuple

import numpy as np

from .hyperrect import HyperRect
from ..config import PartitionConfig

logger = logging.getLogger(__name__)


def choose_split_axis(rect: HyperRect) -> int:
    """Ось разреза - самая широкая (при равенстве первая)"""
    return rect.dimension_of_max_width()


def can_split(rect: HyperRect, config: Optional[PartitionConfig] = None) -> bool:
    """
    Проверка, имеет ли смысл разбивать бокс

    Args:
        rect: Бокс узла
        config: Параметры разбиения (по умолчанию PartitionConfig())

    Returns:
        True, если границы самой широкой оси конечны и ось шире config.min_split_width
    """
    config = config or PartitionConfig()
    config.validate()

    axis = choose_split_axis(rect)
    lower = rect.get_min_corner_coord(axis)
    upper = rect.get_max_corner_coord(axis)
    if not (np.isfinite(lower) and np.isfinite(upper)):
        return False

    # Для конечных границ переполнение даёт inf, что шире любого порога
    return upper - lower > config.min_split_width


def split_hyper_rect(rect: HyperRect,
                     axis: Optional[int] = None,
                     position: Optional[float] = None,
                     config: Optional[PartitionConfig] = None) -> Tuple[HyperRect, HyperRect]:
    """
    Разбиение бокса плоскостью x[axis] = position на два дочерних

    Args:
        rect: Родительский бокс (не изменяется)
        axis: Ось разреза (по умолчанию choose_split_axis)
        position: Положение плоскости (по умолчанию min * (1 - f) + max * f, f = split_fraction)
        config: Параметры разбиения

    Returns:
        (left, right): left сохраняет min_corner, right сохраняет max_corner,
        общая грань лежит на плоскости разреза

    Raises:
        IndexError: Ось вне [0, dimension)
        ValueError: Плоскость вне границ бокса или ось бесконечной ширины
            без явного position
    """
    config = config or PartitionConfig()
    config.validate()

    if axis is None:
        axis = choose_split_axis(rect)

    # Проверка индекса оси выполняется геттером
    lower = rect.get_min_corner_coord(axis)
    upper = rect.get_max_corner_coord(axis)

    if position is None:
        if not (np.isfinite(lower) and np.isfinite(upper)):
            raise ValueError(
                f"cannot place default split on axis {axis} of infinite width"
            )
        # Взвешенная сумма границ не переполняется, в отличие от upper - lower
        fraction = config.split_fraction
        position = lower * (1.0 - fraction) + upper * fraction
        # Округление может вынести точку за границу на ulp
        position = min(max(position, lower), upper)

    position = float(position)
    if not lower <= position <= upper:
        raise ValueError(
            f"split position {position} outside [{lower}, {upper}] on axis {axis}"
        )

    left = rect.clone()
    left.set_max_corner_coord(axis, position)

    right = rect.clone()
    right.set_min_corner_coord(axis, position)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"[Split] axis={axis}, pos={position:.6g}, "
            f"widths={rect.widths().tolist()}"
        )

    return left, right
