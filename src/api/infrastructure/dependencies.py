"""Shared infrastructure dependencies.

Provides ONLY raw infrastructure resources (database pool provider, cache
client). Does NOT import from bounded contexts.
"""

from functools import lru_cache

from infrastructure.cache import CacheClient
from infrastructure.database.dependencies import DatabasePoolProvider
from infrastructure.settings import get_cache_settings, get_database_settings


@lru_cache
def get_database_pool_provider() -> DatabasePoolProvider:
    """Get application-scoped pool provider (singleton).

    The provider is created eagerly but builds its pool on first use.
    """
    return DatabasePoolProvider(get_database_settings)


@lru_cache
def get_cache_client() -> CacheClient:
    """Get application-scoped cache client (singleton)."""
    return CacheClient.from_settings(get_cache_settings())
