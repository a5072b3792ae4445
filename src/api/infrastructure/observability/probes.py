"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class ConnectionProbe(Protocol):
    """Domain probe for database connection observability.

    This probe captures domain-significant events related to database
    connections without exposing logging implementation details.
    """

    def pool_initialized(
        self, transport: str, address: str, min_conn: int, max_conn: int
    ) -> None:
        """Record that the connection pool was initialized."""
        ...

    def pool_initialization_failed(self, error: Exception) -> None:
        """Record that pool initialization failed."""
        ...

    def connection_established(self, address: str, database: str) -> None:
        """Record that a database connection was successfully established."""
        ...

    def connection_attempt_failed(
        self, address: str, attempt: int, error: Exception
    ) -> None:
        """Record a failed connection attempt that will be retried."""
        ...

    def connection_failed(self, address: str, database: str, error: Exception) -> None:
        """Record that a database connection could not be established."""
        ...

    def pool_exhausted(self, timeout: float) -> None:
        """Record that no pooled connection became free within the timeout."""
        ...

    def pool_closed(self) -> None:
        """Record that the connection pool was closed."""
        ...


class DefaultConnectionProbe:
    """Default implementation of ConnectionProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def pool_initialized(
        self, transport: str, address: str, min_conn: int, max_conn: int
    ) -> None:
        self._logger.info(
            "connection_pool_initialized",
            transport=transport,
            address=address,
            min_connections=min_conn,
            max_connections=max_conn,
        )

    def pool_initialization_failed(self, error: Exception) -> None:
        self._logger.error(
            "connection_pool_initialization_failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    def connection_established(self, address: str, database: str) -> None:
        self._logger.info(
            "database_connection_established",
            address=address,
            database=database,
        )

    def connection_attempt_failed(
        self, address: str, attempt: int, error: Exception
    ) -> None:
        self._logger.warning(
            "database_connection_attempt_failed",
            address=address,
            attempt=attempt,
            error=str(error),
        )

    def connection_failed(self, address: str, database: str, error: Exception) -> None:
        self._logger.error(
            "database_connection_failed",
            address=address,
            database=database,
            error=str(error),
        )

    def pool_exhausted(self, timeout: float) -> None:
        self._logger.warning("connection_pool_exhausted", timeout=timeout)

    def pool_closed(self) -> None:
        self._logger.info("connection_pool_closed")


class CacheProbe(Protocol):
    """Domain probe for cache client observability.

    Background cache writes report their failures only through this probe.
    """

    def cache_client_created(self, host: str, port: int) -> None:
        """Record that the cache client was created."""
        ...

    def cache_value_set(self, key: str) -> None:
        """Record that a value was written to the cache."""
        ...

    def cache_command_failed(self, command: str, key: str, error: Exception) -> None:
        """Record that a cache command failed."""
        ...

    def cache_client_closed(self) -> None:
        """Record that the cache client was closed."""
        ...


class DefaultCacheProbe:
    """Default implementation of CacheProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def cache_client_created(self, host: str, port: int) -> None:
        self._logger.info("cache_client_created", host=host, port=port)

    def cache_value_set(self, key: str) -> None:
        self._logger.debug("cache_value_set", key=key)

    def cache_command_failed(self, command: str, key: str, error: Exception) -> None:
        self._logger.error(
            "cache_command_failed",
            command=command,
            key=key,
            error=str(error),
        )

    def cache_client_closed(self) -> None:
        self._logger.info("cache_client_closed")
