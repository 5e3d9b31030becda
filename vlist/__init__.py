"""Size/position bookkeeping for virtualized lists with lazily-measured items."""

from vlist.api.list_viewport import create_list_viewport
from vlist.api.sizing import SizeAndPosition, VisibleRange, create_size_index
from vlist.runtime.offset_resolver import get_updated_offset_for_index
from vlist.runtime.range_finder import find_nearest_item, get_visible_range

__all__ = [
    "SizeAndPosition",
    "VisibleRange",
    "create_list_viewport",
    "create_size_index",
    "find_nearest_item",
    "get_updated_offset_for_index",
    "get_visible_range",
]
