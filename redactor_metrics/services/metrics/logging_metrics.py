from __future__ import annotations

from redactor_metrics.services.logger.interface import LoggingInterface
from redactor_metrics.services.metrics.interface import LogRedactorMetrics
from redactor_metrics.services.secrets.interface import SecretsInterface

_LEVELS = ("debug", "info")


class LoggingMetrics(LogRedactorMetrics):
    """Writes one structured log line per metric call.

    Config (via secrets):
        METRICS_LOG_LEVEL - ``debug`` (default) or ``info``.
    """

    def __init__(self, secrets: SecretsInterface, logger: LoggingInterface) -> None:
        level = secrets.get_or_default("METRICS_LOG_LEVEL", "debug").lower()
        if level not in _LEVELS:
            raise ValueError(
                f"Invalid METRICS_LOG_LEVEL: '{level}' (choices: {', '.join(_LEVELS)})"
            )
        self._emit = logger.info if level == "info" else logger.debug

    def count(self, metric_name: str, tags: dict[str, str]) -> None:
        self._emit("metric", kind="count", metric=metric_name, value=1, tags=dict(tags))

    def timer(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        self._emit("metric", kind="timer", metric=metric_name, value=value, tags=dict(tags))

    def gauge(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        self._emit("metric", kind="gauge", metric=metric_name, value=value, tags=dict(tags))
