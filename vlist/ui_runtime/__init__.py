"""Host-facing viewport geometry helpers."""

from vlist.ui_runtime.geometry import Rect, item_rect
from vlist.ui_runtime.list_viewport import clamp_offset, visible_slice

__all__ = [
    "Rect",
    "clamp_offset",
    "item_rect",
    "visible_slice",
]
