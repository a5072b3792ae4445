"""Lazily-initialized database pool shared by all requests.

The pool is built on first use rather than at startup, so a missing or
broken database configuration only affects the requests that need it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING

from infrastructure.database.engines import PoolConfiguration, create_pool_engine
from infrastructure.database.transport import select_transport
from infrastructure.observability import ConnectionProbe, DefaultConnectionProbe

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from infrastructure.settings import DatabaseSettings


class DatabasePoolProvider:
    """Owns the process-wide database engine and builds it exactly once.

    Concurrent first callers wait on a single in-flight construction
    instead of each building their own pool. A failed construction is not
    cached: the next caller tries again.
    """

    def __init__(
        self,
        settings_factory: Callable[[], DatabaseSettings],
        config: PoolConfiguration | None = None,
        probe: ConnectionProbe | None = None,
    ):
        """Initialize the provider.

        Args:
            settings_factory: Returns the settings to select a transport from
            config: Pool tuning parameters
            probe: Optional observability probe
        """
        self._settings_factory = settings_factory
        self._config = config or PoolConfiguration()
        self._probe = probe or DefaultConnectionProbe()
        self._engine: AsyncEngine | None = None
        self._lock = asyncio.Lock()

    @property
    def engine(self) -> AsyncEngine | None:
        """The engine, if it has been built."""
        return self._engine

    async def get_engine(self) -> AsyncEngine:
        """Get the shared engine, building it on first call.

        Raises:
            DatabaseConfigurationError: If no transport is configured or the
                TLS material cannot be loaded.
        """
        if self._engine is not None:
            return self._engine

        async with self._lock:
            # Double-check after acquiring lock
            if self._engine is None:
                self._engine = self._build()
        return self._engine

    def _build(self) -> AsyncEngine:
        try:
            transport = select_transport(self._settings_factory())
            engine = create_pool_engine(transport, self._config, probe=self._probe)
        except Exception as e:
            self._probe.pool_initialization_failed(error=e)
            raise

        self._probe.pool_initialized(
            transport=transport.kind,
            address=transport.address,
            min_conn=self._config.min_connections,
            max_conn=self._config.max_connections,
        )
        return engine

    async def close(self) -> None:
        """Dispose the engine if it was built.

        Allows the provider to build a fresh engine afterwards.
        """
        async with self._lock:
            if self._engine is not None:
                await self._engine.dispose()
                self._probe.pool_closed()
                self._engine = None
