"""
Configuration helpers for the Users API.

Exposes a frozen Settings object read from environment variables so that
routers/services never fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_PORT = 3000
DEFAULT_USERS_FILE = os.path.join("db", "user.json")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    host: str
    port: int
    users_file: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        host=os.getenv("HOST") or "0.0.0.0",
        port=_int(os.getenv("PORT"), DEFAULT_PORT),
        users_file=os.getenv("USERS_DB_PATH") or DEFAULT_USERS_FILE,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
