"""Prometheus metrics implementation using prometheus_client."""

from __future__ import annotations

import re
import threading
from typing import Any

from redactor_metrics.services.logger.interface import LoggingInterface
from redactor_metrics.services.metrics.interface import LogRedactorMetrics
from redactor_metrics.services.secrets.interface import SecretsInterface

_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z0-9_]")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _sanitize(name: str) -> str:
    safe = _INVALID_NAME_CHARS.sub("_", name)
    if not safe or safe[0].isdigit():
        safe = f"_{safe}"
    return safe


class PrometheusMetrics(LogRedactorMetrics):
    """Metrics backend that records into a private Prometheus registry.

    Config (via secrets):
        METRICS_PROMETHEUS_PORT      - Port to expose /metrics on (default: 0,
                                       meaning no HTTP server; scrape
                                       ``self.registry`` another way). ``close``
                                       stops the server.
        METRICS_PROMETHEUS_NAMESPACE - Prefix for every metric name
                                       (default: log_redactor; empty for none).
        METRICS_TAG_VALUE_MAX_LENGTH - Tag values are truncated to this many
                                       characters (default: 128).

    Metric names and tag keys have characters outside [A-Za-z0-9_] replaced by
    underscores. Tag values have control characters replaced by underscores.
    The first call for a metric fixes its label set; calls with other tag keys,
    and any other prometheus_client error, are logged and dropped.
    """

    def __init__(self, secrets: SecretsInterface, logger: LoggingInterface) -> None:
        import prometheus_client as prom

        self._prom = prom
        self._logger = logger
        self._lock = threading.Lock()
        self._collectors: dict[tuple[str, str], tuple[Any, tuple[str, ...]]] = {}
        self._warned: set[tuple[str, str]] = set()

        namespace = secrets.get_or_default("METRICS_PROMETHEUS_NAMESPACE", "log_redactor")
        self._namespace = _sanitize(namespace) if namespace else ""
        self._max_tag_length = secrets.get_int("METRICS_TAG_VALUE_MAX_LENGTH", 128)
        if self._max_tag_length <= 0:
            raise ValueError("METRICS_TAG_VALUE_MAX_LENGTH must be positive")

        self.registry = prom.CollectorRegistry()
        self._server: Any = None
        port = secrets.get_int("METRICS_PROMETHEUS_PORT", 0)
        if port:
            self._server, _ = prom.start_http_server(port, registry=self.registry)
            logger.info("Prometheus metrics endpoint started", port=port)

    def count(self, metric_name: str, tags: dict[str, str]) -> None:
        self._record("count", metric_name, tags, lambda c: c.inc())

    def timer(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        self._record("timer", metric_name, tags, lambda h: h.observe(value))

    def gauge(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        self._record("gauge", metric_name, tags, lambda g: g.set(value))

    def full_name(self, metric_name: str) -> str:
        """Name as exposed by Prometheus, before any type suffix such as ``_total``."""
        safe = _sanitize(metric_name)
        return f"{self._namespace}_{safe}" if self._namespace else safe

    def close(self) -> None:
        """Stop the /metrics HTTP server, if one was started."""
        if self._server is None:
            return
        self._server.shutdown()
        self._server.server_close()
        self._server = None

    # ── Internal ──────────────────────────────────────────────────────────

    def _escape(self, value: str) -> str:
        return _CONTROL_CHARS.sub("_", str(value))[: self._max_tag_length]

    def _record(self, kind: str, metric_name: str, tags: dict[str, str], apply: Any) -> None:
        safe = _sanitize(metric_name)
        try:
            tags = tags or {}
            labels = {_sanitize(k): self._escape(v) for k, v in tags.items()}
            if len(labels) != len(tags):
                self._drop(kind, safe, f"tag keys {sorted(tags)} collide after sanitizing")
                return
            label_names = tuple(sorted(labels))
            collector, expected = self._collector(kind, safe, label_names)
            if label_names != expected:
                self._drop(
                    kind,
                    safe,
                    f"tag keys {list(label_names)} do not match {list(expected)}",
                )
                return
            if label_names:
                apply(collector.labels(*(labels[n] for n in label_names)))
            else:
                apply(collector)
        except Exception as exc:
            self._drop(kind, safe, repr(exc))

    def _collector(
        self, kind: str, safe: str, label_names: tuple[str, ...]
    ) -> tuple[Any, tuple[str, ...]]:
        # Keyed by the sanitized name: "policy-update" and "policy.update" share a series.
        key = (kind, safe)
        with self._lock:
            if key not in self._collectors:
                factory = {
                    "count": self._prom.Counter,
                    "timer": self._prom.Histogram,
                    "gauge": self._prom.Gauge,
                }[kind]
                collector = factory(
                    safe,
                    f"log redactor {kind} {safe}",
                    label_names,
                    namespace=self._namespace,
                    registry=self.registry,
                )
                self._collectors[key] = (collector, label_names)
            return self._collectors[key]

    def _drop(self, kind: str, safe: str, reason: str) -> None:
        # One warning per metric, otherwise a hot code path floods the log.
        key = (kind, safe)
        with self._lock:
            if key in self._warned:
                return
            self._warned.add(key)
        self._logger.warn("Prometheus metric dropped", kind=kind, metric=safe, reason=reason)
