"""Public error taxonomy for size/position bookkeeping."""

from __future__ import annotations


class VirtualListError(Exception):
    """Base class for caller-input errors raised by vlist."""


class IndexOutOfRangeError(VirtualListError, IndexError):
    """Requested item index lies outside ``[0, item_count)``."""

    def __init__(self, index: int, item_count: int) -> None:
        super().__init__(f"requested index {index} is outside of range 0..{item_count}")
        self.index = index
        self.item_count = item_count


class InvalidSizeError(VirtualListError, ValueError):
    """Size source returned a missing, non-finite or negative value."""

    def __init__(self, index: int, value: object) -> None:
        super().__init__(f"invalid size returned for index {index} of value {value!r}")
        self.index = index
        self.value = value


class InvalidOffsetError(VirtualListError, ValueError):
    """Offset passed to a search is NaN or not a number."""

    def __init__(self, offset: object) -> None:
        super().__init__(f"invalid offset {offset!r} specified")
        self.offset = offset


__all__ = [
    "IndexOutOfRangeError",
    "InvalidOffsetError",
    "InvalidSizeError",
    "VirtualListError",
]
