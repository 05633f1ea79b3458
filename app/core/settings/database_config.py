"""Database connection configuration."""

from typing import Any

from pydantic import BaseModel, SecretStr


class DatabaseConfig(BaseModel, frozen=True):
    """Database connection settings."""

    url: SecretStr

    @property
    def async_url(self) -> str:
        """DB URL rewritten to an async driver (asyncpg for Postgres)."""
        base = self.url.get_secret_value()
        for prefix in ("postgres://", "postgresql://"):
            if base.startswith(prefix):
                return "postgresql+asyncpg://" + base[len(prefix):]
        return base

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured backend is SQLite."""
        return self.async_url.startswith("sqlite")

    @property
    def engine_options(self) -> dict[str, Any]:
        """Pool options accepted by the configured backend."""
        if self.is_sqlite:
            return {}
        return {
            "pool_size": 10,
            "max_overflow": 20,
            "pool_recycle": 3600,
            "pool_pre_ping": True,
        }
