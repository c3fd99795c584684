from __future__ import annotations

from redactor_metrics.services.logger.interface import LoggingInterface
from redactor_metrics.services.logger.memory_logger import MemoryLogger
from redactor_metrics.services.logger.pretty_logger import PrettyLogger
from redactor_metrics.services.secrets.interface import SecretsInterface


class LoggerFactory:
    """Creates and caches logger instances by implementation name.

    Config (via secrets, when given):
        LOG_IMPL  - Default implementation when ``create`` gets no name.
        LOG_LEVEL - Minimum level for the pretty logger (default: INFO).
    """

    _registry: dict[str, type[LoggingInterface]] = {
        "pretty": PrettyLogger,
        "memory": MemoryLogger,
    }

    def __init__(
        self, default_impl: str = "pretty", secrets: SecretsInterface | None = None
    ) -> None:
        self._secrets = secrets
        if secrets is not None:
            default_impl = secrets.get_or_default("LOG_IMPL", default_impl)
        self._check(default_impl)
        self._default_impl = default_impl
        self._instances: dict[str, LoggingInterface] = {}

    def create(self, impl_name: str | None = None) -> LoggingInterface:
        """Return a logger instance, creating one if not yet cached."""
        name = impl_name or self._default_impl
        if name not in self._instances:
            self._check(name)
            self._instances[name] = self._build(name)
        return self._instances[name]

    def _build(self, name: str) -> LoggingInterface:
        if name == "pretty":
            level = "INFO"
            if self._secrets is not None:
                level = self._secrets.get_or_default("LOG_LEVEL", level)
            return PrettyLogger(min_level=level)
        return self._registry[name]()

    def _check(self, name: str) -> None:
        if name not in self._registry:
            raise ValueError(
                f"Unknown logger implementation: '{name}' "
                f"(available: {', '.join(self._registry)})"
            )
