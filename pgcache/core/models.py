"""Core data models for cache stores."""

import os
import re
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]{0,62}$")


class ConnectionParams(BaseModel):
    """Discrete connection parameters derived from a connection string.

    Attributes:
        user: Database user from the URI user-info
        password: Password from the URI user-info, empty when absent
        host: Database host
        port: Port as written in the URI, or the SSL-mode default
        database: Database name (URI path without surrounding slashes)
        ssl_mode: libpq style SSL mode, "disable" unless given
    """

    model_config = ConfigDict(frozen=True)

    user: str = ""
    password: str = Field("", repr=False)
    host: str
    port: str
    database: str = ""
    ssl_mode: str = "disable"

    def to_connect_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``asyncpg.connect``."""
        return {
            "host": self.host,
            "port": int(self.port),
            "user": self.user or None,
            "password": self.password or None,
            "database": self.database or None,
            "ssl": self.ssl_mode,
        }


class StoreOptions(BaseModel):
    """Options accepted by ``CacheStore.set``."""

    expiration: timedelta | None = None
    cost: int = 0
    tags: list[str] = Field(default_factory=list)


class InvalidateOptions(BaseModel):
    """Options accepted by ``CacheStore.invalidate``."""

    tags: list[str] = Field(default_factory=list)


class StoreConfig(BaseModel):
    """Configuration for the PostgreSQL cache store."""

    table: str = "postgresqlcache"
    pool_size: int = Field(5, ge=1)
    max_overflow: int = Field(10, ge=0)

    # Reported by get_with_ttl; entries are never expired by the store
    default_ttl: timedelta = timedelta(hours=24)

    operation_timeout: float | None = Field(None, gt=0)
    connect_timeout: float = Field(10.0, gt=0)

    @field_validator("table")
    @classmethod
    def _check_table(cls, value: str) -> str:
        if not _IDENTIFIER.match(value):
            raise ValueError(f"'{value}' is not a valid SQL table name")
        return value

    @classmethod
    def from_env(cls, prefix: str = "PGCACHE_") -> "StoreConfig":
        """Build a config from environment variables.

        Recognized variables: ``TABLE``, ``POOL_SIZE``, ``MAX_OVERFLOW``,
        ``OPERATION_TIMEOUT`` and ``CONNECT_TIMEOUT``, each with ``prefix``.
        Unset variables keep their defaults.
        """
        fields = {
            "table": "TABLE",
            "pool_size": "POOL_SIZE",
            "max_overflow": "MAX_OVERFLOW",
            "operation_timeout": "OPERATION_TIMEOUT",
            "connect_timeout": "CONNECT_TIMEOUT",
        }
        values = {}
        for field_name, suffix in fields.items():
            raw = os.environ.get(f"{prefix}{suffix}")
            if raw:
                values[field_name] = raw
        return cls(**values)
