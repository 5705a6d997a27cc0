"""Process settings read from the environment."""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(RuntimeError):
    """Raised when a required setting is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    admin_password: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    password = env.get("ADMIN_PASSWORD", "")
    if not password:
        raise ConfigError("Required env var ADMIN_PASSWORD is not set")

    raw_port = env.get("PROJECTHUB_PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigError(f"PROJECTHUB_PORT must be an integer, got {raw_port!r}")

    log_level = env.get("PROJECTHUB_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"PROJECTHUB_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        admin_password=password,
        host=env.get("PROJECTHUB_HOST", DEFAULT_HOST),
        port=port,
        log_level=log_level,
    )
