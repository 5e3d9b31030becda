"""Generic list-viewport helpers for pixel-offset scrolling."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from vlist.api.sizing import VisibleRange

T = TypeVar("T")


def visible_slice(items: Sequence[T], visible_range: VisibleRange) -> list[T]:
    """Return items covered by an inclusive visible range."""
    if visible_range.start is None or visible_range.stop is None:
        return []
    start = max(0, visible_range.start)
    return list(items[start : visible_range.stop + 1])


def clamp_offset(offset: float, container_size: float, total_size: float) -> float:
    """Clamp scroll offset so the viewport never leaves the content bounds."""
    max_offset = max(0.0, total_size - container_size)
    return max(0.0, min(offset, max_offset))


__all__ = ["clamp_offset", "visible_slice"]
