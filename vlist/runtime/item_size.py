"""Normalization of host-supplied item size sources."""

from __future__ import annotations

from numbers import Real

import numpy as np

from vlist.api.sizing import ItemSize, ItemSizeGetter
from vlist.runtime.config import get_config


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def item_size_getter(item_size: ItemSize) -> ItemSizeGetter:
    """Collapse a constant, a sequence or a callable into one ``index -> size`` function."""
    if callable(item_size):
        source = item_size

        def _from_callable(index: int) -> float | None:
            return source(index)

        return _from_callable

    if _is_number(item_size):
        constant = float(item_size)  # type: ignore[arg-type]

        def _from_constant(index: int) -> float:
            _ = index
            return constant

        return _from_constant

    if isinstance(item_size, (str, bytes)):
        raise TypeError(f"unsupported item size source: {item_size!r}")
    sizes = np.asarray(item_size, dtype=np.float64)
    if sizes.ndim != 1:
        raise ValueError(f"item size sequence must be one-dimensional, got shape {sizes.shape}")

    def _from_sequence(index: int) -> float | None:
        if 0 <= index < sizes.shape[0]:
            return float(sizes[index])
        return None

    return _from_sequence


def resolve_estimated_item_size(
    item_size: ItemSize,
    estimated_item_size: float | None = None,
    *,
    default: float | None = None,
) -> float:
    """Pick the placeholder size used for items that were not measured yet."""
    if estimated_item_size:
        return float(estimated_item_size)
    if _is_number(item_size) and item_size:
        return float(item_size)  # type: ignore[arg-type]
    if default is not None:
        return float(default)
    return get_config().estimated_item_size


__all__ = ["item_size_getter", "resolve_estimated_item_size"]
