"""Offset-to-index search and visible window computation over a size index."""

from __future__ import annotations

import logging
import math
from numbers import Real

from vlist.api.errors import IndexOutOfRangeError, InvalidOffsetError
from vlist.api.sizing import SizeIndex, VisibleRange
from vlist.runtime.metrics import MetricsSink, NoopMetricsCollector

_LOG = logging.getLogger("vlist.range")
_NOOP_METRICS = NoopMetricsCollector()


def _coerce_offset(offset: object) -> float:
    if isinstance(offset, bool) or not isinstance(offset, Real):
        raise InvalidOffsetError(offset)
    value = float(offset)
    if math.isnan(value):
        raise InvalidOffsetError(offset)
    return value


def find_nearest_item(
    size_index: SizeIndex,
    offset: float,
    *,
    metrics: MetricsSink | None = None,
) -> int:
    """Return the greatest index whose leading edge is at or before offset.

    Offsets inside the measured prefix are binary-searched directly. Offsets
    past it are bracketed by probing forward from the frontier with doubling
    steps, so only items up to the target get measured.
    """
    target = max(0.0, _coerce_offset(offset))
    if size_index.item_count == 0:
        raise IndexOutOfRangeError(0, 0)
    sink = metrics if metrics is not None else _NOOP_METRICS
    last = size_index.get_size_and_position_of_last_measured_item()
    last_index = max(0, size_index.last_measured_index)

    if last.offset >= target:
        sink.record_search(0)
        return _binary_search(size_index, low=0, high=last_index, target=target)
    return _exponential_search(size_index, index=last_index, target=target, sink=sink)


def _binary_search(size_index: SizeIndex, *, low: int, high: int, target: float) -> int:
    while low <= high:
        middle = low + (high - low) // 2
        current = size_index.get_size_and_position(middle).offset
        if current == target:
            return middle
        if current < target:
            low = middle + 1
        else:
            high = middle - 1
    if low > 0:
        return low - 1
    return 0


def _exponential_search(
    size_index: SizeIndex,
    *,
    index: int,
    target: float,
    sink: MetricsSink,
) -> int:
    item_count = size_index.item_count
    interval = 1
    probes = 0
    while index < item_count and size_index.get_size_and_position(index).offset < target:
        index += interval
        interval *= 2
        probes += 1
    sink.record_search(probes)
    return _binary_search(
        size_index,
        low=index // 2,
        high=min(index, item_count - 1),
        target=target,
    )


def get_visible_range(
    size_index: SizeIndex,
    *,
    container_size: float,
    offset: float,
    overscan_count: int = 0,
    metrics: MetricsSink | None = None,
) -> VisibleRange:
    """Return the inclusive index window intersecting the viewport, plus overscan."""
    if size_index.get_total_size() == 0:
        return VisibleRange()

    start = find_nearest_item(size_index, offset, metrics=metrics)
    max_offset = float(offset) + float(container_size)
    last_index = size_index.item_count - 1

    current = size_index.get_size_and_position(start).end
    stop = start
    while current < max_offset and stop < last_index:
        stop += 1
        current += size_index.get_size_and_position(stop).size

    overscan = max(0, int(overscan_count or 0))
    if overscan:
        start = max(0, start - overscan)
        stop = min(stop + overscan, last_index)

    if _LOG.isEnabledFor(logging.DEBUG):
        _LOG.debug(
            "visible_range offset=%.2f container=%.2f overscan=%d start=%d stop=%d",
            float(offset),
            float(container_size),
            overscan,
            start,
            stop,
        )
    return VisibleRange(start=start, stop=stop)


class RangeFinder:
    """Search helpers bound to one size index."""

    def __init__(self, size_index: SizeIndex, *, metrics: MetricsSink | None = None) -> None:
        self._size_index = size_index
        self._metrics = metrics

    def find_nearest_item(self, offset: float) -> int:
        return find_nearest_item(self._size_index, offset, metrics=self._metrics)

    def get_visible_range(
        self,
        *,
        container_size: float,
        offset: float,
        overscan_count: int = 0,
    ) -> VisibleRange:
        return get_visible_range(
            self._size_index,
            container_size=container_size,
            offset=offset,
            overscan_count=overscan_count,
            metrics=self._metrics,
        )


__all__ = ["RangeFinder", "find_nearest_item", "get_visible_range"]
