from __future__ import annotations

from abc import ABC, abstractmethod

from redactor_metrics.services.metrics import names


class LogRedactorMetrics(ABC):
    """Pluggable sink for the redactor's counts, timers and gauges.

    Each metric has a name and zero or more tags. Metric names and tag keys
    contain only letters, digits and underscores; this is a convention the
    interface does not check. Tag values may be any string, so implementations
    must escape and truncate them to fit their own backend.

    Implementations never raise from these methods. A backend failure is
    absorbed (and usually logged) by the implementation itself.
    """

    COUNT_POLICY_UPDATE = names.COUNT_POLICY_UPDATE
    COUNT_ERROR = names.COUNT_ERROR
    COUNT_REDACTIONS = names.COUNT_REDACTIONS
    COUNT_MATCHES = names.COUNT_MATCHES
    COUNT_SCANNED_LOG_STATEMENTS = names.COUNT_SCANNED_LOG_STATEMENTS
    COUNT_REDACTED_LOG_STATEMENTS = names.COUNT_REDACTED_LOG_STATEMENTS
    COUNT_MATCHED_LOG_STATEMENTS = names.COUNT_MATCHED_LOG_STATEMENTS
    TIMER_READ_POLICY_SECONDS = names.TIMER_READ_POLICY_SECONDS
    GAUGE_POLICY_RULE_COUNT = names.GAUGE_POLICY_RULE_COUNT

    @abstractmethod
    def count(self, metric_name: str, tags: dict[str, str]) -> None:
        """Called when an event occurs."""
        ...

    @abstractmethod
    def timer(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        """Called after measuring the time elapsed for an event, in seconds."""
        ...

    @abstractmethod
    def gauge(self, value: float, metric_name: str, tags: dict[str, str]) -> None:
        """Called after measuring a "current" value."""
        ...
