from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.pool import StaticPool


@dataclass
class DBConfig:
    url: str
    echo: bool = False


def _is_sqlite_memory(url: str) -> bool:
    return url in {"sqlite://", "sqlite:///:memory:"} or url.startswith("sqlite:///:memory:?")


class DatabaseConnection:
    """Engine holder handing out short-lived connections per operation.

    In-memory SQLite shares a single connection through a static pool,
    otherwise every connection would see its own empty database.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._engine = self._build_engine(config)
        self._local = threading.local()

    @staticmethod
    def _build_engine(config: DBConfig) -> Engine:
        if _is_sqlite_memory(config.url):
            return create_engine(
                config.url,
                echo=config.echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        if config.url.startswith("sqlite"):
            return create_engine(config.url, echo=config.echo, connect_args={"check_same_thread": False})
        return create_engine(config.url, echo=config.echo, pool_pre_ping=True)

    @property
    def url(self) -> str:
        return self._config.url

    @property
    def engine(self) -> Engine:
        return self._engine

    def connect(self) -> Connection:
        return self._engine.connect()

    @property
    def active(self) -> Optional[Connection]:
        return getattr(self._local, "conn", None)

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Pin one connection for this thread so every db_cursor inside the block
        joins a single transaction. Nested blocks reuse the outer one.
        """
        if self.active is not None:
            yield self.active
            return
        conn = self._engine.connect()
        self._local.conn = conn
        try:
            with conn.begin():
                yield conn
        finally:
            self._local.conn = None
            conn.close()

    def dispose(self) -> None:
        self._engine.dispose()
