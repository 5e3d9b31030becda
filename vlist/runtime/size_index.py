"""Lazily-populated item offset/size cache with a monotone measurement frontier."""

from __future__ import annotations

import logging
import math
from numbers import Real

from vlist.api.errors import IndexOutOfRangeError, InvalidSizeError
from vlist.api.sizing import (
    EMPTY_SIZE_AND_POSITION,
    ItemSizeGetter,
    SizeAndPosition,
    SizeIndexConfig,
)
from vlist.runtime.config import get_config
from vlist.runtime.metrics import MetricsSink, NoopMetricsCollector

_LOG = logging.getLogger("vlist.size_index")


def _validate_item_count(item_count: int) -> int:
    value = int(item_count)
    if value < 0:
        raise ValueError("item_count must be >= 0")
    return value


def _validate_estimated_item_size(estimated_item_size: float) -> float:
    value = float(estimated_item_size)
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError("estimated_item_size must be a finite number > 0")
    return value


def _validated_size(index: int, raw: object) -> float:
    if raw is None or isinstance(raw, bool) or not isinstance(raw, Real):
        raise InvalidSizeError(index, raw)
    size = float(raw)
    if not math.isfinite(size) or size < 0.0:
        raise InvalidSizeError(index, raw)
    return size


class RuntimeSizeIndex:
    """Incremental cache of exact item offsets and sizes.

    Items are measured in index order, at most once each, the first time any
    index at or beyond them is requested. Entries past the frontier may remain
    in storage after a reset but are never read back.
    """

    def __init__(
        self,
        config: SizeIndexConfig,
        *,
        metrics: MetricsSink | None = None,
        trace: bool | None = None,
    ) -> None:
        self._item_count = _validate_item_count(config.item_count)
        self._item_size_getter: ItemSizeGetter = config.item_size_getter
        self._estimated_item_size = _validate_estimated_item_size(config.estimated_item_size)
        self._data: list[SizeAndPosition] = []
        self._last_measured_index = -1
        self._metrics: MetricsSink = metrics if metrics is not None else NoopMetricsCollector()
        self._trace = get_config().measure_trace_enabled if trace is None else bool(trace)

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def estimated_item_size(self) -> float:
        return self._estimated_item_size

    @property
    def last_measured_index(self) -> int:
        return self._last_measured_index

    @property
    def metrics(self) -> MetricsSink:
        return self._metrics

    def update_config(
        self,
        *,
        item_count: int | None = None,
        item_size_getter: ItemSizeGetter | None = None,
        estimated_item_size: float | None = None,
    ) -> None:
        """Replace provided config fields without touching cached entries.

        A changed size source does not invalidate measured items; callers
        that change sizes must follow up with ``reset_item``.
        """
        if item_count is not None:
            self._item_count = _validate_item_count(item_count)
            if self._last_measured_index >= self._item_count:
                self._last_measured_index = self._item_count - 1
        if estimated_item_size is not None:
            self._estimated_item_size = _validate_estimated_item_size(estimated_item_size)
        if item_size_getter is not None:
            self._item_size_getter = item_size_getter

    def get_size_and_position(self, index: int) -> SizeAndPosition:
        """Return exact offset/size for index, measuring up to it when needed."""
        if index < 0 or index >= self._item_count:
            raise IndexOutOfRangeError(index, self._item_count)
        if index > self._last_measured_index:
            self._measure_through(index)
        return self._data[index]

    def get_size_and_position_of_last_measured_item(self) -> SizeAndPosition:
        if self._last_measured_index < 0:
            return EMPTY_SIZE_AND_POSITION
        return self._data[self._last_measured_index]

    def get_total_size(self) -> float:
        """Return measured extent plus estimated extent of unmeasured items."""
        last = self.get_size_and_position_of_last_measured_item()
        unmeasured = self._item_count - self._last_measured_index - 1
        return last.end + unmeasured * self._estimated_item_size

    def reset_item(self, index: int) -> None:
        """Rewind the frontier so index and everything after it is measured again."""
        self._last_measured_index = min(self._last_measured_index, index - 1)
        self._metrics.record_reset()

    def _measure_through(self, index: int) -> None:
        first = self._last_measured_index + 1
        offset = self.get_size_and_position_of_last_measured_item().end
        self._metrics.record_measure_call()
        measured = 0
        try:
            for current in range(first, index + 1):
                size = _validated_size(current, self._item_size_getter(current))
                entry = SizeAndPosition(offset=offset, size=size)
                if current < len(self._data):
                    self._data[current] = entry
                else:
                    self._data.append(entry)
                self._last_measured_index = current
                offset += size
                measured += 1
        finally:
            self._metrics.record_measured_items(measured)
            if self._trace and _LOG.isEnabledFor(logging.DEBUG):
                _LOG.debug(
                    "measure_extend first=%d requested=%d measured=%d frontier=%d",
                    first,
                    index,
                    measured,
                    self._last_measured_index,
                )


__all__ = ["RuntimeSizeIndex"]
