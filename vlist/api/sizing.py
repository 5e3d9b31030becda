"""Public size/position bookkeeping API contracts."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias

import numpy as np

if TYPE_CHECKING:
    from vlist.runtime.metrics import MetricsSink

ItemSizeGetter: TypeAlias = Callable[[int], float | None]
ItemSize: TypeAlias = float | Sequence[float] | np.ndarray | ItemSizeGetter


@dataclass(frozen=True, slots=True)
class SizeAndPosition:
    """Exact extent of one item along the scroll axis."""

    offset: float
    size: float

    @property
    def end(self) -> float:
        """Return trailing edge offset."""
        return self.offset + self.size


EMPTY_SIZE_AND_POSITION = SizeAndPosition(offset=0.0, size=0.0)


@dataclass(frozen=True, slots=True)
class SizeIndexConfig:
    """Inputs a size index is built from."""

    item_count: int
    item_size_getter: ItemSizeGetter
    estimated_item_size: float


@dataclass(frozen=True, slots=True)
class VisibleRange:
    """Inclusive index window to render; both bounds unset means nothing to render."""

    start: int | None = None
    stop: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.start is None or self.stop is None

    def __iter__(self) -> Iterator[int]:
        if self.start is None or self.stop is None:
            return iter(())
        return iter(range(self.start, self.stop + 1))

    def __len__(self) -> int:
        if self.start is None or self.stop is None:
            return 0
        return self.stop - self.start + 1


class SizeIndex(Protocol):
    """Lazily-measured cache of item offsets and sizes."""

    @property
    def item_count(self) -> int:
        """Return configured item count."""

    @property
    def estimated_item_size(self) -> float:
        """Return placeholder size for unmeasured items."""

    @property
    def last_measured_index(self) -> int:
        """Return measurement frontier, -1 when nothing is measured."""

    def update_config(
        self,
        *,
        item_count: int | None = None,
        item_size_getter: ItemSizeGetter | None = None,
        estimated_item_size: float | None = None,
    ) -> None:
        """Replace any subset of the configuration fields."""

    def get_size_and_position(self, index: int) -> SizeAndPosition:
        """Return exact offset/size for index, measuring up to it when needed."""

    def get_size_and_position_of_last_measured_item(self) -> SizeAndPosition:
        """Return cached entry at the frontier, or an empty entry."""

    def get_total_size(self) -> float:
        """Return measured extent plus estimate for unmeasured items."""

    def reset_item(self, index: int) -> None:
        """Forget measurements from index onward."""


def create_size_index(
    *,
    item_count: int,
    item_size_getter: ItemSizeGetter,
    estimated_item_size: float,
    metrics: MetricsSink | None = None,
) -> SizeIndex:
    """Create default size index implementation."""
    from vlist.runtime.size_index import RuntimeSizeIndex

    return RuntimeSizeIndex(
        SizeIndexConfig(
            item_count=item_count,
            item_size_getter=item_size_getter,
            estimated_item_size=estimated_item_size,
        ),
        metrics=metrics,
    )


__all__ = [
    "EMPTY_SIZE_AND_POSITION",
    "ItemSize",
    "ItemSizeGetter",
    "SizeAndPosition",
    "SizeIndex",
    "SizeIndexConfig",
    "VisibleRange",
    "create_size_index",
]
