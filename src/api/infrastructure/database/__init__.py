"""Database infrastructure - shared connection primitives."""

from infrastructure.database.exceptions import (
    DatabaseConfigurationError,
    DatabaseConnectionError,
    DatabaseError,
    TlsMaterialError,
    TransportNotConfiguredError,
)

__all__ = [
    "DatabaseConfigurationError",
    "DatabaseConnectionError",
    "DatabaseError",
    "TlsMaterialError",
    "TransportNotConfiguredError",
]
