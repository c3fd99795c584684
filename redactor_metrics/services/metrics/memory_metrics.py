from __future__ import annotations

import threading
from dataclasses import dataclass, field

from redactor_metrics.services.metrics.interface import LogRedactorMetrics


@dataclass
class MetricRecord:
    kind: str
    name: str
    value: float | None
    tags: dict[str, str] = field(default_factory=dict)


class MemoryMetrics(LogRedactorMetrics):
    """In-memory metrics that record every call for test assertions."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.records: list[MetricRecord] = []
        self.counters: dict[str, int] = {}
        self.timers: dict[str, list[float]] = {}
        self.gauges: dict[str, float] = {}

    def count(self, metric_name: str, tags: dict[str, str]) -> None:
        with self._lock:
            self.records.append(MetricRecord("count", metric_name, None, dict(tags)))
            self.counters[metric_name] = self.counters.get(metric_name, 0) + 1

    def timer(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        with self._lock:
            self.records.append(MetricRecord("timer", metric_name, value, dict(tags)))
            self.timers.setdefault(metric_name, []).append(value)

    def gauge(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        with self._lock:
            self.records.append(MetricRecord("gauge", metric_name, value, dict(tags)))
            self.gauges[metric_name] = value

    def records_for(self, metric_name: str) -> list[MetricRecord]:
        """Convenience: return the records for one metric name, in call order."""
        with self._lock:
            return [r for r in self.records if r.name == metric_name]

    def clear(self) -> None:
        with self._lock:
            self.records.clear()
            self.counters.clear()
            self.timers.clear()
            self.gauges.clear()
