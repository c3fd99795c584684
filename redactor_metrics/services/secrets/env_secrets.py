from __future__ import annotations

import os
from pathlib import Path

from redactor_metrics.config.env_loader import load_env_file
from redactor_metrics.services.secrets.interface import SecretsInterface


class EnvSecrets(SecretsInterface):
    """Reads secrets from environment variables with optional overrides."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._env = dict(os.environ)
        if overrides:
            self._env.update(overrides)

    @classmethod
    def from_env_file(
        cls,
        env_name: str,
        project_root: Path | None = None,
        overrides: dict[str, str] | None = None,
    ) -> EnvSecrets:
        """Layer .env/<env_name>.env under the process env; explicit overrides win."""
        file_vars = load_env_file(env_name, project_root)
        merged = {k: v for k, v in file_vars.items() if k not in os.environ}
        if overrides:
            merged.update(overrides)
        return cls(overrides=merged)

    def get(self, key: str) -> str | None:
        return self._env.get(key)

    def get_or_default(self, key: str, default: str) -> str:
        return self._env.get(key, default)

    def require(self, key: str) -> str:
        value = self._env.get(key)
        if value is None:
            raise KeyError(f"Required secret '{key}' is not set")
        return value
