from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

_BACKENDS = {"memory"}
_ID_STRATEGIES = {"count", "sequence"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - PERSISTENCE_BACKEND: 'memory' (default; the only backend available)
    - TODO_ID_STRATEGY: 'count' (default) or 'sequence'; see InMemoryRepository
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: root log level name, 'INFO' by default
    - HOST / PORT: bind address for `python -m todo_api` (default 127.0.0.1:3000)
    """

    persistence_backend: str
    id_strategy: str
    cors_allow_origins: List[str]
    log_level: str
    host: str
    port: int


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


def _parse_port(value: str) -> int:
    try:
        port = int(value.strip())
    except ValueError as e:
        raise ValueError(f"PORT must be an integer, got {value!r}") from e
    if not (0 < port < 65536):
        raise ValueError(f"PORT out of range: {port}")
    return port


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    backend = _get_env("PERSISTENCE_BACKEND", "memory").strip().lower()
    if backend not in _BACKENDS:
        logger.warning("Unsupported PERSISTENCE_BACKEND %r; falling back to memory", backend)
        backend = "memory"

    id_strategy = _get_env("TODO_ID_STRATEGY", "count").strip().lower()
    if id_strategy not in _ID_STRATEGIES:
        logger.warning("Unsupported TODO_ID_STRATEGY %r; falling back to count", id_strategy)
        id_strategy = "count"

    cors_raw = _get_env("CORS_ALLOW_ORIGINS", "*")

    return Settings(
        persistence_backend=backend,
        id_strategy=id_strategy,
        cors_allow_origins=_parse_origins(cors_raw),
        log_level=_get_env("LOG_LEVEL", "INFO").strip().upper(),
        host=_get_env("HOST", "127.0.0.1").strip(),
        port=_parse_port(_get_env("PORT", "3000")),
    )
