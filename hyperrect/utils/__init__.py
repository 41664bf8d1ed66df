"""
Утилиты для построения охватывающих боксов
"""
from .bounds import (
    bounding_hyper_rect,
    enclosing_hyper_rect
)

__all__ = [
    'bounding_hyper_rect',
    'enclosing_hyper_rect'
]
