from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection, CursorResult

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Connection]:
    """Open a connection inside a transaction: commit on success, rollback on error.

    Inside DatabaseConnection.transaction() the pinned connection is reused.
    """
    active = conn_factory.active
    if active is not None:
        yield active
        return
    conn = conn_factory.connect()
    try:
        with conn.begin():
            yield conn
    finally:
        conn.close()


def execute(conn: Connection, sql: str, params: Optional[Mapping[str, Any]] = None) -> CursorResult:
    return conn.execute(text(sql), dict(params or {}))


def fetchone(result: CursorResult) -> Optional[Dict[str, Any]]:
    row = result.mappings().first()
    return dict(row) if row else None


def fetchall(result: CursorResult) -> List[Dict[str, Any]]:
    return [dict(r) for r in result.mappings().all()]


def bool_from_db(value: Any, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)
