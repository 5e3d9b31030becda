"""vlist runtime modules."""

from vlist.runtime.config import VlistConfig, get_config, load_config
from vlist.runtime.item_size import item_size_getter, resolve_estimated_item_size
from vlist.runtime.list_viewport import RuntimeListViewport
from vlist.runtime.logging import configure_logging, setup_logging
from vlist.runtime.metrics import (
    MeasurementMetrics,
    MetricsCollector,
    NoopMetricsCollector,
    create_metrics_collector,
)
from vlist.runtime.offset_resolver import OffsetResolver, get_updated_offset_for_index
from vlist.runtime.range_finder import RangeFinder, find_nearest_item, get_visible_range
from vlist.runtime.size_index import RuntimeSizeIndex

__all__ = [
    "MeasurementMetrics",
    "MetricsCollector",
    "NoopMetricsCollector",
    "OffsetResolver",
    "RangeFinder",
    "RuntimeListViewport",
    "RuntimeSizeIndex",
    "VlistConfig",
    "configure_logging",
    "create_metrics_collector",
    "find_nearest_item",
    "get_config",
    "get_updated_offset_for_index",
    "get_visible_range",
    "item_size_getter",
    "load_config",
    "resolve_estimated_item_size",
    "setup_logging",
]
