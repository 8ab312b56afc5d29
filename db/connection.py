"""
db/connection.py
----------------
Owns the process-wide PostgreSQL pool that every repository borrows from.
The pool is a psycopg2 ThreadedConnectionPool, so request threads of the
web server can share it.
"""

from contextlib import contextmanager
from typing import Iterator, Optional, Sequence

import psycopg2
from psycopg2 import pool, extras
from config import DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.ThreadedConnectionPool | None = None


def init_pool(
    min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX, dsn: Optional[str] = None
) -> None:
    """
    Open the shared pool. Calling it again while a pool exists does nothing.

    Args:
        min_conn: Connections opened up front.
        max_conn: Upper bound on simultaneously borrowed connections.
        dsn: libpq connection string; DATABASE_URL when omitted.

    Raises:
        psycopg2.OperationalError: If PostgreSQL refuses the connection.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn or DATABASE_URL)
    except psycopg2.OperationalError as e:
        logger.error(f"Could not open the LightBnB database pool: {e}")
        raise
    logger.info(f"LightBnB database pool ready ({min_conn}-{max_conn} connections).")


def get_connection():
    """
    Borrow a connection; pair every call with release_connection().

    Raises:
        RuntimeError: If init_pool() has not been called.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """Hand a borrowed connection back. A no-op once the pool is closed."""
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close every pooled connection (application shutdown, test teardown)."""
    global _pool
    if _pool is None:
        return
    _pool.closeall()
    _pool = None
    logger.info("LightBnB database pool closed.")


@contextmanager
def pooled_connection() -> Iterator:
    """
    Borrow a connection for one unit of work.

    The transaction is committed when the block exits normally and rolled
    back when it raises. The connection is always returned to the pool.
    """
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        release_connection(conn)


def fetch_rows(sql: str, params: Sequence = ()) -> list[dict]:
    """
    Run one statement and return every row it produced as a dict keyed by
    column name. INSERT ... RETURNING goes through here too.

    Raises:
        psycopg2.Error: After the transaction has been rolled back.
    """
    with pooled_connection() as conn:
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, params)
            return cur.fetchall()
