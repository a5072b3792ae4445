"""Domain layer for the Status bounded context."""

from status.domain.value_objects import DATABASE_PLACEHOLDER, StatusReport

__all__ = ["DATABASE_PLACEHOLDER", "StatusReport"]
