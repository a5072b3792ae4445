"""Database-specific exceptions."""


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class DatabaseConfigurationError(DatabaseError):
    """Raised when the pool cannot be built from the current configuration."""

    pass


class TransportNotConfiguredError(DatabaseConfigurationError):
    """Raised when neither a TCP host nor a Unix socket is configured."""

    def __init__(
        self,
        message: str = "One of INSTANCE_HOST or INSTANCE_UNIX_SOCKET is required.",
    ):
        super().__init__(message)


class TlsMaterialError(DatabaseConfigurationError):
    """Raised when TLS certificate or key files cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class DatabaseConnectionError(DatabaseError):
    """Raised when a database connection or query fails."""

    pass
