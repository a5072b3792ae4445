"""Cache infrastructure - shared Redis connection."""

from infrastructure.cache.client import CacheClient

__all__ = ["CacheClient"]
