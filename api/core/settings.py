"""
Environment-driven settings.

Every accessor reads the environment on call so tests can monkeypatch
variables without reloading modules. Bad values fall back to defaults.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


def raw_database_url() -> str:
    return os.environ.get("DATABASE_URL", "").strip()


def db_pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def db_auto_migrate() -> bool:
    return _env_bool("DB_AUTO_MIGRATE", True)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def log_format() -> str:
    value = _env_str("LOG_FORMAT", "text").lower()
    return value if value in {"text", "json"} else "text"


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
