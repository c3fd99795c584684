import socket
import urllib.request
from concurrent.futures import ThreadPoolExecutor

import pytest

pytest.importorskip("prometheus_client")

from redactor_metrics.services.logger.memory_logger import MemoryLogger
from redactor_metrics.services.metrics import names
from redactor_metrics.services.metrics.prometheus_metrics import PrometheusMetrics
from redactor_metrics.services.secrets.env_secrets import EnvSecrets


def _metrics(**overrides: str) -> tuple[PrometheusMetrics, MemoryLogger]:
    logger = MemoryLogger()
    config = {
        "METRICS_PROMETHEUS_PORT": "0",
        "METRICS_PROMETHEUS_NAMESPACE": "log_redactor",
        "METRICS_TAG_VALUE_MAX_LENGTH": "128",
        **overrides,
    }
    return PrometheusMetrics(EnvSecrets(overrides=config), logger), logger


def test_count_increments_counter():
    m, _ = _metrics()
    m.count(names.COUNT_REDACTIONS, {"policy": "pii"})
    m.count(names.COUNT_REDACTIONS, {"policy": "pii"})
    m.count(names.COUNT_REDACTIONS, {"policy": "pci"})
    value = m.registry.get_sample_value("log_redactor_redactions_total", {"policy": "pii"})
    assert value == 2.0
    value = m.registry.get_sample_value("log_redactor_redactions_total", {"policy": "pci"})
    assert value == 1.0


def test_timer_observes_histogram():
    m, _ = _metrics()
    m.timer(0.042, names.TIMER_READ_POLICY_SECONDS, {})
    assert m.registry.get_sample_value("log_redactor_read_policy_seconds_count") == 1.0
    assert m.registry.get_sample_value("log_redactor_read_policy_seconds_sum") == pytest.approx(0.042)


def test_gauge_accepts_negative_values():
    m, logger = _metrics()
    m.gauge(-3.5, names.GAUGE_POLICY_RULE_COUNT, {"env": "prod"})
    value = m.registry.get_sample_value("log_redactor_policy_rule_count", {"env": "prod"})
    assert value == -3.5
    assert logger.at_level("WARN") == []


def test_names_and_tag_keys_are_sanitized():
    m, _ = _metrics()
    m.count("bad-name.x", {"tag-key": "v"})
    assert m.full_name("bad-name.x") == "log_redactor_bad_name_x"
    assert m.registry.get_sample_value("log_redactor_bad_name_x_total", {"tag_key": "v"}) == 1.0


def test_tag_values_are_escaped_and_truncated():
    m, _ = _metrics(METRICS_TAG_VALUE_MAX_LENGTH="5")
    m.count(names.COUNT_MATCHES, {"rule": "a\nbcdefgh"})
    assert m.registry.get_sample_value("log_redactor_matches_total", {"rule": "a_bcd"}) == 1.0


def test_empty_namespace_disables_prefix():
    m, _ = _metrics(METRICS_PROMETHEUS_NAMESPACE="")
    m.count(names.COUNT_ERROR, {})
    assert m.registry.get_sample_value("error_total") == 1.0


def test_mismatched_tag_keys_are_dropped_and_logged_once():
    m, logger = _metrics()
    m.count(names.COUNT_ERROR, {"component": "policy"})
    m.count(names.COUNT_ERROR, {"other": "x"})
    m.count(names.COUNT_ERROR, {"other": "y"})
    assert m.registry.get_sample_value("log_redactor_error_total", {"component": "policy"}) == 1.0
    warnings = logger.at_level("WARN")
    assert len(warnings) == 1
    assert warnings[0].ctx["metric"] == "error"


def test_conflicting_kinds_are_absorbed():
    m, logger = _metrics()
    m.count("shared_name", {})
    assert m.gauge(1.0, "shared_name", {}) is None
    assert m.registry.get_sample_value("log_redactor_shared_name_total") == 1.0
    assert [w.ctx["kind"] for w in logger.at_level("WARN")] == ["gauge"]


def test_adapters_do_not_share_registries():
    first, _ = _metrics()
    second, _ = _metrics()
    first.count(names.COUNT_POLICY_UPDATE, {})
    second.count(names.COUNT_POLICY_UPDATE, {})
    assert first.registry.get_sample_value("log_redactor_policy_update_total") == 1.0
    assert second.registry.get_sample_value("log_redactor_policy_update_total") == 1.0


def test_invalid_tag_length_raises_at_construction():
    with pytest.raises(ValueError, match="METRICS_TAG_VALUE_MAX_LENGTH"):
        _metrics(METRICS_TAG_VALUE_MAX_LENGTH="0")
    with pytest.raises(ValueError, match="must be an integer"):
        _metrics(METRICS_TAG_VALUE_MAX_LENGTH="lots")


def test_tag_keys_colliding_after_sanitizing_are_dropped():
    m, logger = _metrics()
    m.count(names.COUNT_MATCHES, {"rule-id": "a", "rule_id": "b"})
    assert m.registry.get_sample_value("log_redactor_matches_total", {"rule_id": "b"}) is None
    warnings = logger.at_level("WARN")
    assert len(warnings) == 1
    assert "collide" in warnings[0].ctx["reason"]


def test_names_sanitizing_to_the_same_series_share_a_collector():
    m, logger = _metrics()
    m.count("policy-update", {})
    m.count("policy.update", {})
    assert m.registry.get_sample_value("log_redactor_policy_update_total") == 2.0
    assert logger.at_level("WARN") == []


def test_concurrent_drops_warn_once():
    m, logger = _metrics()
    m.count(names.COUNT_ERROR, {"component": "policy"})

    def emit(i: int) -> None:
        m.count(names.COUNT_ERROR, {"other": str(i)})

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(emit, range(500)))

    assert len(logger.at_level("WARN")) == 1


def _free_port() -> int:
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def test_close_stops_http_server():
    port = _free_port()
    m, logger = _metrics(METRICS_PROMETHEUS_PORT=str(port))
    m.count(names.COUNT_REDACTIONS, {"policy": "pii"})
    with urllib.request.urlopen(f"http://127.0.0.1:{port}/metrics", timeout=5) as resp:
        assert b'log_redactor_redactions_total{policy="pii"} 1.0' in resp.read()
    assert logger.messages == ["Prometheus metrics endpoint started"]

    m.close()
    m.close()
    with pytest.raises(OSError):
        urllib.request.urlopen(f"http://127.0.0.1:{port}/metrics", timeout=5)


def test_close_without_server_is_noop():
    m, _ = _metrics()
    m.close()
