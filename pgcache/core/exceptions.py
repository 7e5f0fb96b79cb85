"""Custom exceptions for cache stores."""


class CacheStoreError(Exception):
    """Base exception for cache store errors."""

    def __init__(self, message: str, store: str = "postgresql") -> None:
        """Initialize error.

        Args:
            message: Error message
            store: Backend-type identifier of the store raising the error
        """
        self.store = store
        super().__init__(f"[{store}] {message}")


class ConnectionStringError(CacheStoreError):
    """Raised when a connection string cannot be turned into parameters."""

    def __init__(self, message: str, connection_string: str = "") -> None:
        """Initialize error.

        Args:
            message: Error message
            connection_string: Offending connection string, password redacted
        """
        self.connection_string = connection_string
        super().__init__(message)


class MalformedURIError(ConnectionStringError):
    """Raised when the connection string is not a URI."""

    pass


class MalformedAddressError(ConnectionStringError):
    """Raised when the URI authority cannot be split into host and port."""

    pass


class MalformedQueryError(ConnectionStringError):
    """Raised when the URI query component cannot be parsed."""

    pass


class SchemaInitError(CacheStoreError):
    """Raised when the backing table cannot be verified or created."""

    def __init__(self, table: str, reason: str) -> None:
        """Initialize error.

        Args:
            table: Name of the backing table
            reason: Description of the underlying failure
        """
        self.table = table
        super().__init__(f"Failed to initialize table '{table}': {reason}")


class NotFoundError(CacheStoreError, KeyError):
    """Raised when a key has no stored value (a cache miss)."""

    def __init__(self, key: str) -> None:
        """Initialize error.

        Args:
            key: The key that was looked up
        """
        self.key = key
        CacheStoreError.__init__(self, f"Value not found for key '{key}'")

    def __str__(self) -> str:
        return Exception.__str__(self)


class CorruptPayloadError(CacheStoreError):
    """Raised when a stored value cannot be decompressed."""

    pass


class DeadlineExceededError(CacheStoreError, TimeoutError):
    """Raised when an operation does not finish within its timeout."""

    def __init__(self, operation: str, timeout: float) -> None:
        """Initialize error.

        Args:
            operation: Name of the store operation
            timeout: Timeout that elapsed, in seconds
        """
        self.operation = operation
        self.timeout = timeout
        super().__init__(f"{operation} exceeded deadline of {timeout}s")


class StoreClosedError(CacheStoreError):
    """Raised when an operation is attempted on a closed store."""

    pass
