"""Schema bootstrap for the PostgreSQL store."""

import asyncio
import logging

import asyncpg

from pgcache.core.exceptions import SchemaInitError
from pgcache.core.models import ConnectionParams

logger = logging.getLogger(__name__)

_BOOTSTRAP_ERRORS = (OSError, asyncio.TimeoutError, asyncpg.PostgresError, asyncpg.InterfaceError)

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS {table} (
    key text NOT NULL UNIQUE,
    value bytea NOT NULL
)"""


async def ensure_schema(params: ConnectionParams, table: str, timeout: float = 10.0) -> None:
    """Create the backing table if it does not exist.

    Opens a short-lived connection from discrete parameters, separate from the
    store's engine, and closes it whether or not the DDL succeeds.

    Args:
        params: Connection parameters parsed from the connection string
        table: Name of the backing table (a validated identifier)
        timeout: Seconds allowed for connecting and for the DDL statement

    Raises:
        SchemaInitError: If the connection or the DDL fails
    """
    try:
        conn = await asyncpg.connect(**params.to_connect_kwargs(), timeout=timeout)
    except _BOOTSTRAP_ERRORS as e:
        raise SchemaInitError(table, f"cannot connect to {params.host}:{params.port}: {e}") from e

    try:
        await conn.execute(CREATE_TABLE_SQL.format(table=table), timeout=timeout)
    except _BOOTSTRAP_ERRORS as e:
        raise SchemaInitError(table, str(e)) from e
    finally:
        await conn.close()

    logger.info(f"Cache table '{table}' ready on {params.host}:{params.port}/{params.database}")
