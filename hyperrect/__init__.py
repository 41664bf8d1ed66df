from __future__ import annotations
from typing import Any

# 1) Версия пакета
try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError
    __version__ = _pkg_version("hyperrect")
except PackageNotFoundError:
    # пакет не установлен (запуск из исходников)
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "HyperRect",
    "DimensionMismatchError",
    "PartitionConfig",
    "choose_split_axis",
    "can_split",
    "split_hyper_rect",
    "bounding_hyper_rect",
    "enclosing_hyper_rect",
]


# 2) Ленивый экспорт для публичного API
def __getattr__(name: str) -> Any:
    if name in ("HyperRect", "DimensionMismatchError"):
        from .core import hyperrect as _hyperrect
        return getattr(_hyperrect, name)
    if name in ("choose_split_axis", "can_split", "split_hyper_rect"):
        from .core import partition as _partition
        return getattr(_partition, name)
    if name in ("bounding_hyper_rect", "enclosing_hyper_rect"):
        from .utils import bounds as _bounds
        return getattr(_bounds, name)
    if name == "PartitionConfig":
        from .config import PartitionConfig
        return PartitionConfig
    raise AttributeError(name)
