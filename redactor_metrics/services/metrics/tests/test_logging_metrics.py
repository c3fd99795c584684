import pytest

from redactor_metrics.services.logger.memory_logger import MemoryLogger
from redactor_metrics.services.metrics import names
from redactor_metrics.services.metrics.logging_metrics import LoggingMetrics
from redactor_metrics.services.secrets.env_secrets import EnvSecrets


def _metrics(**overrides: str) -> tuple[LoggingMetrics, MemoryLogger]:
    logger = MemoryLogger()
    secrets = EnvSecrets(overrides={"METRICS_LOG_LEVEL": "debug", **overrides})
    return LoggingMetrics(secrets, logger), logger


def test_count_logs_one_debug_line():
    metrics, logger = _metrics()
    metrics.count(names.COUNT_REDACTIONS, {"policy": "pii"})
    assert len(logger.entries) == 1
    entry = logger.entries[0]
    assert entry.level == "DEBUG"
    assert entry.ctx == {
        "kind": "count",
        "metric": "redactions",
        "value": 1,
        "tags": {"policy": "pii"},
    }


def test_timer_and_gauge_log_values():
    metrics, logger = _metrics()
    metrics.timer(0.042, names.TIMER_READ_POLICY_SECONDS, {})
    metrics.gauge(-3.5, names.GAUGE_POLICY_RULE_COUNT, {"env": "prod"})
    assert [(e.ctx["kind"], e.ctx["value"]) for e in logger.entries] == [
        ("timer", 0.042),
        ("gauge", -3.5),
    ]


def test_info_level():
    metrics, logger = _metrics(METRICS_LOG_LEVEL="INFO")
    metrics.count(names.COUNT_ERROR, {})
    assert [e.level for e in logger.entries] == ["INFO"]


def test_invalid_level_raises_at_construction():
    with pytest.raises(ValueError, match="Invalid METRICS_LOG_LEVEL"):
        _metrics(METRICS_LOG_LEVEL="trace")
