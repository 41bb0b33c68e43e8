from __future__ import annotations

import threading
from dataclasses import dataclass

from mysql.connector import pooling
from mysql.connector.constants import ClientFlag

from ..core.constants import DB_POOL_NAME, DEFAULT_DB_POOL_SIZE


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_DB_POOL_SIZE


class PooledConnection:
    """Pooled connection that frees its pool slot when closed."""

    def __init__(self, conn, release):
        self._conn = conn
        self._release = release

    def close(self) -> None:
        try:
            self._conn.close()
        finally:
            release, self._release = self._release, None
            if release is not None:
                release()

    def __getattr__(self, name):
        return getattr(self._conn, name)


class DatabaseConnection:
    """Process-wide MySQL connection pool.

    Created once by build_container() and handed to every repository.
    connect() blocks while all pool_size connections are checked out,
    since MySQLConnectionPool.get_connection() fails instead of waiting.
    """

    def __init__(self, config: DBConfig, *, pool=None):
        self._slots = threading.BoundedSemaphore(int(config.pool_size))
        self._pool = pool or pooling.MySQLConnectionPool(
            pool_name=DB_POOL_NAME,
            pool_size=int(config.pool_size),
            host=config.host,
            port=int(config.port),
            user=config.user,
            password=config.password,
            database=config.database,
            # UPDATE rowcount counts matched rows, not only changed ones
            client_flags=[ClientFlag.FOUND_ROWS],
        )

    def connect(self) -> PooledConnection:
        self._slots.acquire()
        try:
            conn = self._pool.get_connection()
        except Exception:
            self._slots.release()
            raise
        return PooledConnection(conn, self._slots.release)
