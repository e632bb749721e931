"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Driver exceptions never leave this module: a unique-constraint violation
becomes `errors.UniqueViolation`, anything else the store or the driver
raises becomes `errors.StorageError`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings
from .errors import StorageError, UniqueViolation

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).with_name("schema.sql")

_pool: asyncpg.Pool | None = None


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = settings.raw_database_url()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool(dsn: str | None = None) -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=dsn or database_url(),
        min_size=settings.db_pool_min_size(),
        max_size=settings.db_pool_max_size(),
        command_timeout=settings.db_command_timeout(),
    )
    logger.info("db_pool_opened max_size=%s", settings.db_pool_max_size())


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def is_initialized() -> bool:
    return _pool is not None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


@contextmanager
def _translate_errors(sql: str) -> Iterator[None]:
    try:
        yield
    except asyncpg.UniqueViolationError as exc:
        raise UniqueViolation(exc.constraint_name, str(exc)) from exc
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as exc:
        statement = " ".join(sql.split())[:80]
        logger.error("db_statement_failed error=%s sql=%r", type(exc).__name__, statement)
        raise StorageError(str(exc) or type(exc).__name__) from exc


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    with _translate_errors(sql):
        row = await pool().fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    with _translate_errors(sql):
        rows = await pool().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL) and return the status tag,
    e.g. "UPDATE 1".
    """
    with _translate_errors(sql):
        return await pool().execute(sql, *args)


async def apply_schema() -> None:
    """
    Create the pets/vets/visits relations if they are missing.
    """
    await execute(SCHEMA_PATH.read_text(encoding="utf-8"))
    logger.info("db_schema_applied path=%s", SCHEMA_PATH.name)


async def reset_tables() -> None:
    """
    Empty every relation and restart identifiers. Test harness only.
    """
    await execute("TRUNCATE TABLE visits, vets, pets RESTART IDENTITY")


async def ping() -> bool:
    row = await fetch_one("SELECT 1 AS ok")
    return row is not None
