"""Headless list viewport composing size index, range finder and offset resolver."""

from __future__ import annotations

import logging
import math

from vlist.api.alignment import Alignment, ScrollChangeReason, normalize_alignment
from vlist.api.list_viewport import ItemsRenderedCallback, RenderedItem
from vlist.api.sizing import ItemSize, SizeIndexConfig, VisibleRange
from vlist.runtime.config import VlistConfig, get_config
from vlist.runtime.item_size import item_size_getter, resolve_estimated_item_size
from vlist.runtime.metrics import MetricsSink, create_metrics_collector
from vlist.runtime.offset_resolver import OffsetResolver
from vlist.runtime.range_finder import RangeFinder
from vlist.runtime.size_index import RuntimeSizeIndex

_LOG = logging.getLogger("vlist.viewport")


class RuntimeListViewport:
    """Scroll offset state and render window for one list.

    The host forwards observed scroll offsets and viewport resizes, asks for
    the items to render, and issues programmatic scrolls. Nothing here
    listens to events or touches a widget.
    """

    def __init__(
        self,
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
    ) -> None:
        self._config = config if config is not None else get_config()
        self._item_size = item_size
        self._estimated_item_size = estimated_item_size
        self._metrics: MetricsSink = (
            metrics
            if metrics is not None
            else create_metrics_collector(enabled=self._config.metrics_enabled)
        )
        self._size_index = RuntimeSizeIndex(
            SizeIndexConfig(
                item_count=item_count,
                item_size_getter=item_size_getter(item_size),
                estimated_item_size=self._resolve_estimate(),
            ),
            metrics=self._metrics,
            trace=self._config.measure_trace_enabled,
        )
        self._range_finder = RangeFinder(self._size_index, metrics=self._metrics)
        self._alignment: Alignment = normalize_alignment(
            scroll_to_alignment, default=self._config.scroll_alignment
        )
        self._offset_resolver = OffsetResolver(self._size_index, default_alignment=self._alignment)
        self._container_size = max(0.0, float(container_size))
        self._overscan_count = (
            self._config.overscan_count if overscan_count is None else max(0, int(overscan_count))
        )
        self._on_items_rendered = on_items_rendered
        self._scroll_to_index = scroll_to_index
        self._reason: ScrollChangeReason = "requested"
        self._offset = 0.0
        if scroll_offset is not None:
            self._offset = float(scroll_offset)
        elif scroll_to_index is not None:
            self._offset = self._offset_for_index(scroll_to_index)

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def scroll_change_reason(self) -> ScrollChangeReason:
        return self._reason

    @property
    def container_size(self) -> float:
        return self._container_size

    @property
    def overscan_count(self) -> int:
        return self._overscan_count

    @property
    def size_index(self) -> RuntimeSizeIndex:
        return self._size_index

    @property
    def metrics(self) -> MetricsSink:
        return self._metrics

    def total_size(self) -> float:
        return self._size_index.get_total_size()

    def observe_scroll(self, offset: float) -> bool:
        """Record a host-reported offset, ignoring invalid or unchanged values."""
        value = float(offset)
        if not math.isfinite(value) or value < 0.0 or value == self._offset:
            return False
        self._offset = value
        self._reason = "observed"
        return True

    def scroll_to_offset(self, offset: float) -> float:
        self._scroll_to_index = None
        self._offset = max(0.0, float(offset))
        self._reason = "requested"
        return self._offset

    def scroll_to_index(self, index: int, *, alignment: Alignment | None = None) -> float:
        """Pin index as scroll target and move the offset to reveal it."""
        if alignment is not None:
            self._alignment = normalize_alignment(alignment)
        self._scroll_to_index = index
        self._offset = self._offset_for_index(index)
        self._reason = "requested"
        return self._offset

    def set_container_size(self, container_size: float) -> None:
        self._container_size = max(0.0, float(container_size))

    def update_items(
        self,
        *,
        item_count: int | None = None,
        item_size: ItemSize | None = None,
        estimated_item_size: float | None = None,
    ) -> None:
        """Push new item configuration, re-measure from the start and re-pin the scroll target."""
        getter = None
        if item_size is not None:
            self._item_size = item_size
            getter = item_size_getter(item_size)
        if estimated_item_size is not None:
            self._estimated_item_size = estimated_item_size
        self._size_index.update_config(
            item_count=item_count,
            item_size_getter=getter,
            estimated_item_size=self._resolve_estimate(),
        )
        self.recompute_sizes(0)
        _LOG.debug(
            "items_updated count=%d estimate=%.2f",
            self._size_index.item_count,
            self._size_index.estimated_item_size,
        )
        if self._scroll_to_index is not None:
            self._offset = self._offset_for_index(self._scroll_to_index)
            self._reason = "requested"

    def recompute_sizes(self, start_index: int = 0) -> None:
        self._size_index.reset_item(start_index)

    def visible_range(self) -> VisibleRange:
        return self._range_finder.get_visible_range(
            container_size=self._container_size,
            offset=self._offset,
            overscan_count=self._overscan_count,
        )

    def rendered_items(self) -> tuple[RenderedItem, ...]:
        """Return items to render and notify the items-rendered callback."""
        window = self.visible_range()
        items = tuple(
            RenderedItem(
                index=index,
                size_and_position=self._size_index.get_size_and_position(index),
            )
            for index in window
        )
        if (
            self._on_items_rendered is not None
            and window.start is not None
            and window.stop is not None
        ):
            self._on_items_rendered(window.start, window.stop)
        return items

    def _resolve_estimate(self) -> float:
        return resolve_estimated_item_size(
            self._item_size,
            self._estimated_item_size,
            default=self._config.estimated_item_size,
        )

    def _offset_for_index(self, index: int) -> float:
        item_count = self._size_index.item_count
        if item_count == 0:
            return 0.0
        if index < 0 or index >= item_count:
            index = 0
        return self._offset_resolver.get_updated_offset_for_index(
            align=self._alignment,
            container_size=self._container_size,
            current_offset=self._offset,
            target_index=index,
        )


__all__ = ["RuntimeListViewport"]
