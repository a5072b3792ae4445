"""Dependency injection for Status bounded context.

Composes infrastructure resources (pool provider, cache client) with
status-specific components (repository, service).
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.cache import CacheClient
from infrastructure.database.dependencies import DatabasePoolProvider
from infrastructure.dependencies import get_cache_client, get_database_pool_provider
from status.application.services import StatusService
from status.infrastructure.catalog_repository import PostgresCatalogRepository


def get_catalog_repository(
    pool_provider: Annotated[
        DatabasePoolProvider, Depends(get_database_pool_provider)
    ],
) -> PostgresCatalogRepository:
    """Get catalog repository over the shared pool."""
    return PostgresCatalogRepository(pool_provider)


def get_status_service(
    catalog: Annotated[PostgresCatalogRepository, Depends(get_catalog_repository)],
    cache: Annotated[CacheClient, Depends(get_cache_client)],
) -> StatusService:
    """Get StatusService instance.

    Args:
        catalog: System catalog repository
        cache: Application-scoped cache client

    Returns:
        StatusService instance
    """
    return StatusService(catalog=catalog, cache=cache)
