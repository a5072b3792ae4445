"""Domain probe for status service operations."""

from __future__ import annotations

from typing import Protocol

import structlog


class StatusServiceProbe(Protocol):
    """Domain probe for status page collection."""

    def database_unavailable(self, error: Exception) -> None:
        """Record that the table list could not be read."""
        ...

    def status_collected(self, database_connected: bool, cache_hit: bool) -> None:
        """Record that a status report was assembled."""
        ...


class DefaultStatusServiceProbe:
    """Default implementation of StatusServiceProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def database_unavailable(self, error: Exception) -> None:
        self._logger.error(
            "status_database_unavailable",
            error=str(error),
            error_type=type(error).__name__,
        )

    def status_collected(self, database_connected: bool, cache_hit: bool) -> None:
        self._logger.debug(
            "status_collected",
            database_connected=database_connected,
            cache_hit=cache_hit,
        )
