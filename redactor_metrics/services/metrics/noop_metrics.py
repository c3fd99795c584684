from redactor_metrics.services.metrics.interface import LogRedactorMetrics


class NoopMetrics(LogRedactorMetrics):
    """Ignores all metrics rather than collecting them. The disabled configuration."""

    def count(self, metric_name: str, tags: dict[str, str]) -> None:
        pass

    def timer(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        pass

    def gauge(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        pass


# Stateless, so one instance is shared by every caller.
NOOP = NoopMetrics()
