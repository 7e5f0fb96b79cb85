"""pgcache - PostgreSQL-backed cache store."""

from pgcache.codecs import compress, decode_tag_keys, decompress, encode_tag_keys
from pgcache.core import (
    CacheStore,
    CacheStoreError,
    ConnectionParams,
    ConnectionStringError,
    CorruptPayloadError,
    DeadlineExceededError,
    InvalidateOptions,
    MalformedAddressError,
    MalformedQueryError,
    MalformedURIError,
    NotFoundError,
    SchemaInitError,
    StoreClosedError,
    StoreConfig,
    StoreOptions,
)
from pgcache.stores import parse_connection_string
from pgcache.stores.postgresql import (
    POSTGRESQL_CACHE_TYPE,
    PostgresqlStore,
    create_postgresql_store,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Contract
    "CacheStore",
    # Store
    "PostgresqlStore",
    "create_postgresql_store",
    "POSTGRESQL_CACHE_TYPE",
    "parse_connection_string",
    # Models
    "ConnectionParams",
    "StoreOptions",
    "InvalidateOptions",
    "StoreConfig",
    # Codecs
    "compress",
    "decompress",
    "encode_tag_keys",
    "decode_tag_keys",
    # Exceptions
    "CacheStoreError",
    "ConnectionStringError",
    "MalformedURIError",
    "MalformedAddressError",
    "MalformedQueryError",
    "SchemaInitError",
    "NotFoundError",
    "CorruptPayloadError",
    "DeadlineExceededError",
    "StoreClosedError",
]
