"""Server configuration."""

from pydantic import BaseModel


class ServerConfig(BaseModel, frozen=True):
    """Uvicorn server settings."""

    host: str
    port: int
    log_level: str = "info"
