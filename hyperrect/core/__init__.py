"""
Ядро: гипер-прямоугольник и его разбиение
"""
from .hyperrect import HyperRect, DimensionMismatchError
from .partition import choose_split_axis, can_split, split_hyper_rect

__all__ = [
    'HyperRect',
    'DimensionMismatchError',
    'choose_split_axis',
    'can_split',
    'split_hyper_rect'
]
