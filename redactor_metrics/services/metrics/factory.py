from __future__ import annotations

from redactor_metrics.config.container import Container
from redactor_metrics.services.logger.factory import LoggerFactory
from redactor_metrics.services.logger.interface import LoggingInterface
from redactor_metrics.services.metrics.guarded_metrics import GuardedMetrics
from redactor_metrics.services.metrics.interface import LogRedactorMetrics
from redactor_metrics.services.metrics.noop_metrics import NOOP
from redactor_metrics.services.registry import resolve_implementation
from redactor_metrics.services.secrets.env_secrets import EnvSecrets
from redactor_metrics.services.secrets.interface import SecretsInterface

_DEFAULT_IMPL = "noop"


def create_metrics(
    impl_name: str | None = None,
    secrets: SecretsInterface | None = None,
    logger: LoggingInterface | None = None,
) -> LogRedactorMetrics:
    """Build the configured metrics backend.

    Config (via secrets):
        METRICS_IMPL    - Backend name when ``impl_name`` is not given
                          (noop, memory, logging, prometheus; default: noop).
        METRICS_GUARDED - Wrap the backend in GuardedMetrics (default: false).

    ``noop`` always returns the shared NOOP instance. Unknown names raise
    ValueError here, at startup, never while emitting metrics.
    """
    secrets = secrets or EnvSecrets()
    name = impl_name or secrets.get_or_default("METRICS_IMPL", _DEFAULT_IMPL)
    cls = resolve_implementation(name)
    if name == _DEFAULT_IMPL:
        return NOOP

    if logger is None:
        logger = LoggerFactory(secrets=secrets).create()

    container = Container()
    container.register_instance(SecretsInterface, secrets)
    container.register_instance(LoggingInterface, logger)
    metrics: LogRedactorMetrics = container.resolve(cls)

    guarded = secrets.get_bool("METRICS_GUARDED")
    if guarded:
        metrics = GuardedMetrics(metrics, logger)
    logger.info("Metrics backend ready", impl=name, guarded=guarded)
    return metrics
