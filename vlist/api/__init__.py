"""Public vlist API contracts."""

from vlist.api.alignment import (
    Alignment,
    Direction,
    ScrollChangeReason,
    normalize_alignment,
    normalize_direction,
)
from vlist.api.errors import (
    IndexOutOfRangeError,
    InvalidOffsetError,
    InvalidSizeError,
    VirtualListError,
)
from vlist.api.list_viewport import (
    ItemsRenderedCallback,
    ListViewport,
    RenderedItem,
    create_list_viewport,
)
from vlist.api.logging import LoggingConfig
from vlist.api.sizing import (
    EMPTY_SIZE_AND_POSITION,
    ItemSize,
    ItemSizeGetter,
    SizeAndPosition,
    SizeIndex,
    SizeIndexConfig,
    VisibleRange,
    create_size_index,
)

__all__ = [
    "Alignment",
    "Direction",
    "EMPTY_SIZE_AND_POSITION",
    "IndexOutOfRangeError",
    "InvalidOffsetError",
    "InvalidSizeError",
    "ItemSize",
    "ItemSizeGetter",
    "ItemsRenderedCallback",
    "ListViewport",
    "LoggingConfig",
    "RenderedItem",
    "ScrollChangeReason",
    "SizeAndPosition",
    "SizeIndex",
    "SizeIndexConfig",
    "VirtualListError",
    "VisibleRange",
    "create_list_viewport",
    "create_size_index",
    "normalize_alignment",
    "normalize_direction",
]
