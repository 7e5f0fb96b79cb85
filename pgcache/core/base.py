"""Base interface for cache stores."""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Optional

from pgcache.core.models import InvalidateOptions, StoreOptions


class CacheStore(ABC):
    """Abstract base class for cache store backends.

    This interface defines the contract every backend adapter follows so that
    a multi-backend cache layer can swap them transparently. Keys may be any
    value with a deterministic string form; values are raw bytes.

    Misses are reported by raising ``NotFoundError`` rather than returning
    ``None``, so an empty payload and an absent key are never confused.

    Example:
        >>> async with await create_postgresql_store(url) as store:
        ...     await store.set("user:1", b"payload", StoreOptions(tags=["users"]))
        ...     await store.invalidate(InvalidateOptions(tags=["users"]))
    """

    @abstractmethod
    async def get(self, key: Any, timeout: Optional[float] = None) -> bytes:
        """Return the value stored under a key.

        Args:
            key: Cache key, coerced with ``str()``
            timeout: Seconds to wait before giving up

        Returns:
            The bytes most recently stored for the key

        Raises:
            NotFoundError: If the key has no stored value
            CorruptPayloadError: If the stored value cannot be decoded
            DeadlineExceededError: If the timeout elapses
        """
        pass

    @abstractmethod
    async def get_with_ttl(
        self, key: Any, timeout: Optional[float] = None
    ) -> tuple[bytes, timedelta]:
        """Return the value stored under a key together with its TTL."""
        pass

    @abstractmethod
    async def set(
        self,
        key: Any,
        value: bytes,
        options: Optional[StoreOptions] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Store a value under a key, replacing any previous value.

        Args:
            key: Cache key, coerced with ``str()``
            value: Payload bytes
            options: Store options (tags, expiration, cost)
            timeout: Seconds to wait before giving up

        Raises:
            TypeError: If value is not a bytes-like object
        """
        pass

    @abstractmethod
    async def delete(self, key: Any, timeout: Optional[float] = None) -> None:
        """Remove a key. Removing an absent key is not an error."""
        pass

    @abstractmethod
    async def invalidate(
        self, options: Optional[InvalidateOptions] = None, timeout: Optional[float] = None
    ) -> None:
        """Delete every key recorded under the given tags."""
        pass

    @abstractmethod
    async def clear(self, timeout: Optional[float] = None) -> None:
        """Remove every stored key and tag."""
        pass

    @abstractmethod
    def get_type(self) -> str:
        """Return the backend-type identifier."""
        pass

    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if the backend is operational, False otherwise
        """
        return True

    async def close(self) -> None:
        """Release connections held by the store.

        Implementations should override this to dispose of database engines
        or other resources. The store must not be used afterwards.
        """
        pass

    async def __aenter__(self) -> "CacheStore":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
