"""Registry mapping metrics backend names to concrete class paths.

Uses string paths for lazy imports, so importing the registry doesn't pull in
prometheus_client unless that backend is selected.
"""

import importlib
from typing import Any

REGISTRY: dict[str, str] = {
    "noop": "redactor_metrics.services.metrics.noop_metrics.NoopMetrics",
    "memory": "redactor_metrics.services.metrics.memory_metrics.MemoryMetrics",
    "logging": "redactor_metrics.services.metrics.logging_metrics.LoggingMetrics",
    "prometheus": "redactor_metrics.services.metrics.prometheus_metrics.PrometheusMetrics",
}


def resolve_class(dotted_path: str) -> type[Any]:
    """Import and return a class from a dotted module.ClassName path."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


def resolve_implementation(impl_name: str) -> type[Any]:
    """Look up the concrete metrics backend class for an implementation name."""
    dotted = REGISTRY.get(impl_name)
    if dotted is None:
        available = ", ".join(REGISTRY)
        raise ValueError(
            f"Unknown implementation '{impl_name}' for metrics (available: {available})"
        )
    return resolve_class(dotted)
