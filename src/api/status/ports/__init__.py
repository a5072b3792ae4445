"""Ports for the Status bounded context."""

from status.ports.repositories import ICatalogRepository, IStatusCache

__all__ = ["ICatalogRepository", "IStatusCache"]
