"""
db/connection.py
----------------
Manages the PostgreSQL connection.
Uses psycopg2's SimpleConnectionPool sized to a single connection: it is
opened once at startup, lent to every statement, and closed on exit.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import pool
from config import DATABASE_URL
from db.exceptions import DatabaseOperationFailure
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None


def init_pool(dsn: Optional[str] = None, min_conn: int = 1, max_conn: int = 1) -> None:
    """
    Open the database connection pool.

    Args:
        dsn: Connection string; defaults to ``config.DATABASE_URL``.
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Raises:
        DatabaseOperationFailure: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, dsn or DATABASE_URL)
        logger.info("Database connection opened successfully.")
    except psycopg2.Error as e:
        logger.debug(f"Failed to connect to the database: {e}")
        raise DatabaseOperationFailure.from_error("Failed to connect to the database", e) from e


def get_connection():
    """
    Get the connection from the pool.

    Returns:
        A psycopg2 connection object.

    Raises:
        RuntimeError: If the pool has not been initialized.
        DatabaseOperationFailure: If the connection cannot be handed out.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    try:
        return _pool.getconn()
    except psycopg2.Error as e:
        raise DatabaseOperationFailure.from_error("Failed to acquire a connection", e) from e


def release_connection(conn) -> None:
    """
    Return a connection back to the pool.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection closed.")


@contextmanager
def database_session(dsn: Optional[str] = None) -> Iterator[None]:
    """
    Keep the connection open for the duration of a ``with`` block.

    The pool is closed on every exit path, including exceptions.
    """
    init_pool(dsn)
    try:
        yield
    finally:
        close_pool()
