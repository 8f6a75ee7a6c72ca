import glob
import os
import shutil
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from pytest_postgresql import factories

from db.connection import database_session
from db.init_db import reset_schema

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

# Debian/Ubuntu keep the server binaries off PATH, under /usr/lib/postgresql/<version>/bin.
PG_CTL = shutil.which("pg_ctl") or next(
    iter(sorted(glob.glob("/usr/lib/postgresql/*/bin/pg_ctl"), reverse=True)), None
)

cafe_postgresql_proc = factories.postgresql_proc(executable=PG_CTL)
cafe_postgresql = factories.postgresql("cafe_postgresql_proc")

_DB_MODULES = (
    "db.init_db",
    "repositories.menu_repo",
    "repositories.order_repo",
    "repositories.report_repo",
)


@pytest.fixture
def fake_db(monkeypatch):
    """A mocked psycopg2 connection handed out to every repository."""
    conn = MagicMock(name="connection")
    cursor = conn.cursor.return_value.__enter__.return_value
    release = MagicMock(name="release_connection")
    for module in _DB_MODULES:
        monkeypatch.setattr(f"{module}.get_connection", lambda: conn)
        monkeypatch.setattr(f"{module}.release_connection", release)
    return SimpleNamespace(conn=conn, cursor=cursor, release=release)


@pytest.fixture
def database_dsn(request):
    """
    DSN of the PostgreSQL the integration tests run on.

    TEST_DATABASE_URL wins when set; otherwise a throwaway server is
    started from the local PostgreSQL binaries.
    """
    if TEST_DATABASE_URL:
        return TEST_DATABASE_URL
    if PG_CTL is None:
        pytest.skip("no pg_ctl found and TEST_DATABASE_URL is not set")
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("the PostgreSQL server refuses to start as root; set TEST_DATABASE_URL")
    proc = request.getfixturevalue("cafe_postgresql_proc")
    conn = request.getfixturevalue("cafe_postgresql")
    dsn = conn.info.dsn
    if proc.password:
        dsn += f" password={proc.password}"
    return dsn


@pytest.fixture
def database(database_dsn):
    """An empty, freshly reset schema on the test PostgreSQL."""
    with database_session(database_dsn):
        reset_schema()
        yield
