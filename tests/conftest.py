"""
Test configuration and fixtures for the LightBnB data access layer.
Provides a mocked connection pool for unit tests and a seeded PostgreSQL
database for integration tests.
"""

import os
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from db import connection
from db.connection import close_pool, init_pool, pooled_connection
from db.init_db import create_tables


TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")


@pytest.fixture
def mock_db(monkeypatch):
    """
    Replace the module-level pool with a mock.

    Returns a namespace with the pool, the connection it hands out and the
    cursor that connection yields. Set `cursor.fetchall.return_value` to
    control query results.
    """
    cursor = MagicMock()
    cursor.fetchall.return_value = []
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    pool = MagicMock()
    pool.getconn.return_value = conn
    monkeypatch.setattr(connection, "_pool", pool)
    return SimpleNamespace(pool=pool, conn=conn, cursor=cursor)


def executed_params(cursor) -> tuple:
    """Return the parameters of the last statement the mock cursor ran."""
    return tuple(cursor.execute.call_args[0][1])


def executed_sql(cursor) -> str:
    """Return the text of the last statement the mock cursor ran."""
    return cursor.execute.call_args[0][0]


def _run(sql: str) -> None:
    with pooled_connection() as conn, conn.cursor() as cur:
        cur.execute(sql)


@pytest.fixture(scope="module")
def database():
    """Connect to TEST_DATABASE_URL, create the schema and empty every table."""
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL is not set")
    init_pool(1, 2, dsn=TEST_DATABASE_URL)
    create_tables()
    _run("TRUNCATE property_reviews, reservations, properties, users RESTART IDENTITY CASCADE;")
    yield
    close_pool()
