"""Measurement and search counters for lightweight vlist diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class MeasurementMetrics:
    """Read-only snapshot of accumulated counters."""

    measured_items: int = 0
    measure_calls: int = 0
    resets: int = 0
    searches: int = 0
    probes: int = 0


class MetricsSink(Protocol):
    """Counter surface consumed by size index and range finder."""

    def record_measure_call(self) -> None: ...

    def record_measured_items(self, count: int) -> None: ...

    def record_reset(self) -> None: ...

    def record_search(self, probes: int = 0) -> None: ...

    def snapshot(self) -> MeasurementMetrics: ...


class NoopMetricsCollector:
    """No-op collector for zero-impact disabled mode."""

    def record_measure_call(self) -> None:
        return None

    def record_measured_items(self, count: int) -> None:
        _ = count

    def record_reset(self) -> None:
        return None

    def record_search(self, probes: int = 0) -> None:
        _ = probes

    def snapshot(self) -> MeasurementMetrics:
        return MeasurementMetrics()


class MetricsCollector:
    """Small in-memory counter collector."""

    def __init__(self) -> None:
        self._measured_items = 0
        self._measure_calls = 0
        self._resets = 0
        self._searches = 0
        self._probes = 0

    def record_measure_call(self) -> None:
        self._measure_calls += 1

    def record_measured_items(self, count: int) -> None:
        self._measured_items += int(count)

    def record_reset(self) -> None:
        self._resets += 1

    def record_search(self, probes: int = 0) -> None:
        self._searches += 1
        self._probes += max(0, int(probes))

    def snapshot(self) -> MeasurementMetrics:
        return MeasurementMetrics(
            measured_items=self._measured_items,
            measure_calls=self._measure_calls,
            resets=self._resets,
            searches=self._searches,
            probes=self._probes,
        )


def create_metrics_collector(*, enabled: bool) -> MetricsCollector | NoopMetricsCollector:
    """Create real or no-op collector based on enable flag."""
    if enabled:
        return MetricsCollector()
    return NoopMetricsCollector()


__all__ = [
    "MeasurementMetrics",
    "MetricsCollector",
    "MetricsSink",
    "NoopMetricsCollector",
    "create_metrics_collector",
]
