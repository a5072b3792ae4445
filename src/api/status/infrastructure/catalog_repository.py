"""PostgreSQL system catalog repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

import asyncpg
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from infrastructure.database.exceptions import DatabaseConnectionError
from infrastructure.observability import ConnectionProbe, DefaultConnectionProbe

if TYPE_CHECKING:
    from infrastructure.database.dependencies import DatabasePoolProvider

LIST_TABLES_QUERY = text("SELECT tablename FROM pg_catalog.pg_tables")


class PostgresCatalogRepository:
    """Lists tables through the shared, lazily-built pool."""

    def __init__(
        self,
        pool_provider: DatabasePoolProvider,
        probe: ConnectionProbe | None = None,
    ):
        self._pool_provider = pool_provider
        self._probe = probe or DefaultConnectionProbe()

    async def list_table_names(self) -> list[str]:
        """Return table names from pg_catalog.pg_tables.

        Raises:
            DatabaseConfigurationError: If the pool cannot be built.
            DatabaseConnectionError: If no connection can be acquired or the
                query fails.
        """
        engine = await self._pool_provider.get_engine()

        try:
            async with engine.connect() as conn:
                result = await conn.execute(LIST_TABLES_QUERY)
                return list(result.scalars().all())
        except PoolTimeoutError as e:
            self._probe.pool_exhausted(timeout=engine.pool.timeout())
            raise DatabaseConnectionError(
                f"Pool exhausted, cannot get connection: {e}"
            ) from e
        except (SQLAlchemyError, asyncpg.PostgresError, OSError) as e:
            raise DatabaseConnectionError(f"Failed to list tables: {e}") from e
