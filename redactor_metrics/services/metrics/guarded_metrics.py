"""Error-absorbing wrapper for metrics backends that may raise.

Telemetry must never interrupt the workflow it instruments, so any exception
from the wrapped backend is logged and dropped here.
"""

from __future__ import annotations

from redactor_metrics.services.logger.interface import LoggingInterface
from redactor_metrics.services.metrics.interface import LogRedactorMetrics


class GuardedMetrics(LogRedactorMetrics):
    """Transparent wrapper that swallows (and logs) failures of the inner backend."""

    def __init__(self, inner: LogRedactorMetrics, logger: LoggingInterface) -> None:
        self._inner = inner
        self._logger = logger

    @property
    def inner(self) -> LogRedactorMetrics:
        return self._inner

    def count(self, metric_name: str, tags: dict[str, str]) -> None:
        try:
            self._inner.count(metric_name, tags)
        except Exception as exc:
            self._dropped("count", metric_name, exc)

    def timer(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        try:
            self._inner.timer(value, metric_name, tags)
        except Exception as exc:
            self._dropped("timer", metric_name, exc)

    def gauge(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        try:
            self._inner.gauge(value, metric_name, tags)
        except Exception as exc:
            self._dropped("gauge", metric_name, exc)

    def _dropped(self, kind: str, metric_name: str, exc: Exception) -> None:
        self._logger.warn(
            "Metrics backend failed, metric dropped",
            kind=kind,
            metric=metric_name,
            backend=type(self._inner).__name__,
            error=repr(exc),
        )
