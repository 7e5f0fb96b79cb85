"""Tests for the schema bootstrap connection.

Uses mocks to avoid requiring a real database connection in CI.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

pytest.importorskip("asyncpg")

import asyncpg

from pgcache.core.exceptions import SchemaInitError
from pgcache.core.models import ConnectionParams
from pgcache.stores.schema import ensure_schema


@pytest.fixture
def params():
    return ConnectionParams(
        user="test", password="secret", host="localhost", port="5432", database="cache"
    )


@pytest.fixture
def mock_conn():
    conn = AsyncMock()
    conn.execute = AsyncMock(return_value="CREATE TABLE")
    conn.close = AsyncMock()
    return conn


@pytest.mark.asyncio
async def test_creates_table_and_closes(params, mock_conn):
    """The bootstrap connection runs the DDL and is closed."""
    with patch("pgcache.stores.schema.asyncpg.connect", AsyncMock(return_value=mock_conn)) as connect:
        await ensure_schema(params, "postgresqlcache", timeout=3.0)

    connect.assert_awaited_once_with(
        host="localhost",
        port=5432,
        user="test",
        password="secret",
        database="cache",
        ssl="disable",
        timeout=3.0,
    )
    sql = mock_conn.execute.call_args.args[0]
    assert "CREATE TABLE IF NOT EXISTS postgresqlcache" in sql
    assert "key text NOT NULL UNIQUE" in sql
    assert "value bytea NOT NULL" in sql
    mock_conn.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_ddl_failure_still_closes(params, mock_conn):
    """A failing DDL raises SchemaInitError and releases the connection."""
    mock_conn.execute.side_effect = asyncpg.InsufficientPrivilegeError("permission denied")

    with patch("pgcache.stores.schema.asyncpg.connect", AsyncMock(return_value=mock_conn)):
        with pytest.raises(SchemaInitError, match="permission denied") as exc_info:
            await ensure_schema(params, "postgresqlcache")

    assert isinstance(exc_info.value.__cause__, asyncpg.InsufficientPrivilegeError)
    mock_conn.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_connect_failure(params):
    """An unreachable server raises SchemaInitError."""
    connect = AsyncMock(side_effect=ConnectionRefusedError("refused"))

    with patch("pgcache.stores.schema.asyncpg.connect", connect):
        with pytest.raises(SchemaInitError, match="cannot connect to localhost:5432"):
            await ensure_schema(params, "postgresqlcache")


@pytest.mark.asyncio
async def test_ddl_timeout_still_closes(params, mock_conn):
    mock_conn.execute.side_effect = asyncio.TimeoutError()

    with patch("pgcache.stores.schema.asyncpg.connect", AsyncMock(return_value=mock_conn)):
        with pytest.raises(SchemaInitError):
            await ensure_schema(params, "postgresqlcache")

    mock_conn.close.assert_awaited_once()
