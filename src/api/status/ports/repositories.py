"""Repository protocols for the Status bounded context.

Defines the interfaces the status service depends on, keeping it
independent of SQLAlchemy and redis.
"""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable


@runtime_checkable
class ICatalogRepository(Protocol):
    """Read access to the database system catalog."""

    async def list_table_names(self) -> list[str]:
        """Return the names of all tables known to the catalog.

        Raises:
            Exception: Any configuration, connection or query failure.
        """
        ...


@runtime_checkable
class IStatusCache(Protocol):
    """Key-value cache used for the liveness round trip."""

    host: str

    def set(self, key: str, value: str) -> asyncio.Task[None]:
        """Write a value without waiting for the result."""
        ...

    async def get(self, key: str) -> str | None:
        """Read a value, returning None on miss or failure."""
        ...
