"""Domain value objects for the Status bounded context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Shown in place of the table list whenever the database cannot be queried,
# whatever the cause
DATABASE_PLACEHOLDER = "PostgreSQL not connected"


class StatusReport(BaseModel):
    """Snapshot of both backing stores, as seen by one request.

    Attributes:
        cache_host: Configured cache host
        cache_value: Value read back from the cache (None on miss or error)
        table_names: Tables from the system catalog, or None when the
            database could not be queried
    """

    model_config = ConfigDict(frozen=True)

    cache_host: str
    cache_value: str | None = None
    table_names: tuple[str, ...] | None = None

    @property
    def database_connected(self) -> bool:
        return self.table_names is not None

    def table_names_display(self) -> str:
        """Comma-joined table names, or the placeholder."""
        if self.table_names is None:
            return DATABASE_PLACEHOLDER
        return ", ".join(self.table_names)
