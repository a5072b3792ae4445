"""Status service.

Application service behind the status page. It exercises both backing
stores and never lets their failures escape.
"""

from __future__ import annotations

from status.application.observability import (
    DefaultStatusServiceProbe,
    StatusServiceProbe,
)
from status.domain.value_objects import StatusReport
from status.ports.repositories import ICatalogRepository, IStatusCache

PROBE_KEY = "key"
PROBE_VALUE = "value!"


class StatusService:
    """Collects a StatusReport from the database and the cache."""

    def __init__(
        self,
        catalog: ICatalogRepository,
        cache: IStatusCache,
        probe: StatusServiceProbe | None = None,
    ):
        """Initialize the service.

        Args:
            catalog: System catalog access (builds the pool on first use)
            cache: Shared cache client
            probe: Optional domain probe for observability
        """
        self._catalog = catalog
        self._cache = cache
        self._probe = probe or DefaultStatusServiceProbe()

    async def collect(self) -> StatusReport:
        """Write the probe key, list tables and read the key back.

        Database failures of any kind degrade to a report without table
        names. Cache failures are handled by the cache client.
        """
        self._cache.set(PROBE_KEY, PROBE_VALUE)

        table_names: tuple[str, ...] | None
        try:
            table_names = tuple(await self._catalog.list_table_names())
        except Exception as e:
            self._probe.database_unavailable(error=e)
            table_names = None

        cache_value = await self._cache.get(PROBE_KEY)

        report = StatusReport(
            cache_host=self._cache.host,
            cache_value=cache_value,
            table_names=table_names,
        )
        self._probe.status_collected(
            database_connected=report.database_connected,
            cache_hit=cache_value is not None,
        )
        return report
