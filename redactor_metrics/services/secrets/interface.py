from abc import ABC, abstractmethod


class SecretsInterface(ABC):
    """Provides access to secrets and configuration values."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Get a secret value by key. Returns None if not found."""
        ...

    @abstractmethod
    def get_or_default(self, key: str, default: str) -> str:
        """Get a secret value, returning default if not found."""
        ...

    @abstractmethod
    def require(self, key: str) -> str:
        """Get a secret value, raising KeyError if not found."""
        ...

    def get_int(self, key: str, default: int) -> int:
        """Get an integer value. Missing or empty means default; garbage raises ValueError."""
        raw = self.get(key)
        if raw is None or not raw.strip():
            return default
        try:
            return int(raw.strip())
        except ValueError:
            raise ValueError(f"Secret '{key}' must be an integer, got '{raw}'") from None

    def get_bool(self, key: str, default: bool = False) -> bool:
        raw = self.get(key)
        if raw is None or not raw.strip():
            return default
        return raw.strip().lower() in ("true", "1", "yes")
