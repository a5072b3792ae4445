"""Application layer for the Status bounded context."""

from status.application.services import StatusService

__all__ = ["StatusService"]
