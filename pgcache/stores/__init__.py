"""Cache store implementations."""

from pgcache.stores.connection import engine_url, parse_connection_string, split_host_port
from pgcache.stores.postgresql import (
    POSTGRESQL_CACHE_TYPE,
    PostgresqlStore,
    create_postgresql_store,
)

__all__ = [
    "PostgresqlStore",
    "create_postgresql_store",  # Factory function for easy instantiation
    "POSTGRESQL_CACHE_TYPE",
    "parse_connection_string",
    "engine_url",
    "split_host_port",
]
