"""Scroll offset resolution for bringing a target item into view."""

from __future__ import annotations

import logging
import math

from vlist.api.alignment import Alignment, normalize_alignment
from vlist.api.sizing import SizeIndex
from vlist.ui_runtime.list_viewport import clamp_offset

_LOG = logging.getLogger("vlist.offset")


def _coerce_container_size(container_size: object) -> float:
    if container_size is None or isinstance(container_size, bool):
        return 0.0
    try:
        value = float(container_size)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    return value


def get_updated_offset_for_index(
    size_index: SizeIndex,
    *,
    align: Alignment | str | None = "auto",
    container_size: float | str | None,
    current_offset: float,
    target_index: int,
) -> float:
    """Return the offset that places target_index in the viewport per alignment.

    ``auto`` keeps ``current_offset`` when the target is already fully visible
    and otherwise snaps to the nearer edge. The result never scrolls past the
    content bounds.
    """
    size = _coerce_container_size(container_size)
    if size <= 0.0:
        return 0.0
    alignment = normalize_alignment(align)

    datum = size_index.get_size_and_position(target_index)
    max_offset = datum.offset
    min_offset = max_offset - size + datum.size

    if alignment == "start":
        ideal_offset = max_offset
    elif alignment == "end":
        ideal_offset = min_offset
    elif alignment == "center":
        ideal_offset = max_offset - (size - datum.size) / 2
    else:
        ideal_offset = max(min_offset, min(max_offset, float(current_offset)))

    total_size = size_index.get_total_size()
    resolved = clamp_offset(ideal_offset, size, total_size)
    if _LOG.isEnabledFor(logging.DEBUG):
        _LOG.debug(
            "offset_for_index target=%d align=%s container=%.2f current=%.2f resolved=%.2f",
            target_index,
            alignment,
            size,
            float(current_offset),
            resolved,
        )
    return resolved


class OffsetResolver:
    """Alignment-driven offset resolution bound to one size index."""

    def __init__(self, size_index: SizeIndex, *, default_alignment: Alignment = "auto") -> None:
        self._size_index = size_index
        self._default_alignment = default_alignment

    def get_updated_offset_for_index(
        self,
        *,
        container_size: float | str | None,
        current_offset: float,
        target_index: int,
        align: Alignment | str | None = None,
    ) -> float:
        return get_updated_offset_for_index(
            self._size_index,
            align=self._default_alignment if align is None else align,
            container_size=container_size,
            current_offset=current_offset,
            target_index=target_index,
        )


__all__ = ["OffsetResolver", "get_updated_offset_for_index"]
