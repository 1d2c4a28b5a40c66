from __future__ import annotations

from typing import Mapping

from ..database.connection import DatabaseConnection
from ..database.sql_base import db_cursor, execute, fetchall, fetchone
from .repository import SettingsRepository


class SQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_all(self) -> Mapping[str, str]:
        with db_cursor(self._conn_factory) as conn:
            rows = fetchall(execute(conn, "SELECT setting_key, setting_value FROM settings"))
            return {r["setting_key"]: r["setting_value"] for r in rows}

    def upsert(self, *, key: str, value: str) -> None:
        params = {"key": key, "value": value}
        with db_cursor(self._conn_factory) as conn:
            existing = fetchone(execute(conn, "SELECT id FROM settings WHERE setting_key=:key", params))
            if existing:
                execute(conn, "UPDATE settings SET setting_value=:value WHERE setting_key=:key", params)
            else:
                execute(conn, "INSERT INTO settings(setting_key, setting_value) VALUES(:key, :value)", params)
