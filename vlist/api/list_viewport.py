"""Public headless list-viewport API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias

from vlist.api.alignment import Alignment, Direction, ScrollChangeReason
from vlist.api.sizing import ItemSize, SizeAndPosition, SizeIndex, VisibleRange
from vlist.ui_runtime.geometry import Rect, item_rect

if TYPE_CHECKING:
    from vlist.runtime.config import VlistConfig
    from vlist.runtime.metrics import MetricsSink

ItemsRenderedCallback: TypeAlias = Callable[[int, int], None]


@dataclass(frozen=True, slots=True)
class RenderedItem:
    """One item the host should render, with its scroll-axis placement."""

    index: int
    size_and_position: SizeAndPosition

    def rect(
        self, *, direction: Direction | str | None = "vertical", cross_size: float = 0.0
    ) -> Rect:
        """Return content-space rectangle for this item."""
        return item_rect(self.size_and_position, direction=direction, cross_size=cross_size)


class ListViewport(Protocol):
    """Scroll state and render window for one virtualized list."""

    @property
    def offset(self) -> float:
        """Return current scroll offset."""

    @property
    def scroll_change_reason(self) -> ScrollChangeReason:
        """Return whether the current offset was requested or observed."""

    @property
    def container_size(self) -> float:
        """Return viewport extent along the scroll axis."""

    @property
    def overscan_count(self) -> int:
        """Return extra items rendered on each side of the window."""

    @property
    def size_index(self) -> SizeIndex:
        """Return backing size index."""

    def total_size(self) -> float:
        """Return estimated content extent."""

    def observe_scroll(self, offset: float) -> bool:
        """Record a host-observed offset; return whether state changed."""

    def scroll_to_offset(self, offset: float) -> float:
        """Request a scroll to an explicit offset."""

    def scroll_to_index(self, index: int, *, alignment: Alignment | None = None) -> float:
        """Request a scroll that brings index into view."""

    def set_container_size(self, container_size: float) -> None:
        """Update viewport extent."""

    def update_items(
        self,
        *,
        item_count: int | None = None,
        item_size: ItemSize | None = None,
        estimated_item_size: float | None = None,
    ) -> None:
        """Replace item configuration and re-measure."""

    def recompute_sizes(self, start_index: int = 0) -> None:
        """Forget measurements from start_index onward."""

    def visible_range(self) -> VisibleRange:
        """Return current render window."""

    def rendered_items(self) -> tuple[RenderedItem, ...]:
        """Return render window items with placement."""


def create_list_viewport(
    *,
    item_count: int,
    item_size: ItemSize,
    container_size: float,
    estimated_item_size: float | None = None,
    overscan_count: int | None = None,
    scroll_offset: float | None = None,
    scroll_to_index: int | None = None,
    scroll_to_alignment: Alignment | None = None,
    on_items_rendered: ItemsRenderedCallback | None = None,
    metrics: MetricsSink | None = None,
    config: VlistConfig | None = None,
) -> ListViewport:
    """Create default headless list viewport implementation."""
    from vlist.runtime.list_viewport import RuntimeListViewport

    return RuntimeListViewport(
        item_count=item_count,
        item_size=item_size,
        container_size=container_size,
        estimated_item_size=estimated_item_size,
        overscan_count=overscan_count,
        scroll_offset=scroll_offset,
        scroll_to_index=scroll_to_index,
        scroll_to_alignment=scroll_to_alignment,
        on_items_rendered=on_items_rendered,
        metrics=metrics,
        config=config,
    )


__all__ = [
    "ItemsRenderedCallback",
    "ListViewport",
    "RenderedItem",
    "create_list_viewport",
]
