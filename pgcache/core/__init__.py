"""Core abstractions and models."""

from pgcache.core.base import CacheStore
from pgcache.core.exceptions import (
    CacheStoreError,
    ConnectionStringError,
    CorruptPayloadError,
    DeadlineExceededError,
    MalformedAddressError,
    MalformedQueryError,
    MalformedURIError,
    NotFoundError,
    SchemaInitError,
    StoreClosedError,
)
from pgcache.core.models import (
    ConnectionParams,
    InvalidateOptions,
    StoreConfig,
    StoreOptions,
)

__all__ = [
    # Contract
    "CacheStore",
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
    # Models
    "ConnectionParams",
    "StoreOptions",
    "InvalidateOptions",
    "StoreConfig",
]
