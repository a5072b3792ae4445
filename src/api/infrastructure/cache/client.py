"""Redis cache client.

Wraps a single ``redis.asyncio.Redis`` connection shared by the whole
process. Cache failures never propagate to callers; they are reported
through the cache probe.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import redis.asyncio as redis
from redis.exceptions import RedisError

from infrastructure.observability import CacheProbe, DefaultCacheProbe

if TYPE_CHECKING:
    from infrastructure.settings import CacheSettings


class CacheClient:
    """Process-wide cache connection with fire-and-forget writes.

    Attributes:
        host: Cache host, as shown on the status page
        port: Cache port
    """

    def __init__(
        self,
        client: redis.Redis,
        host: str,
        port: int,
        probe: CacheProbe | None = None,
    ):
        self.host = host
        self.port = port
        self._client = client
        self._probe = probe or DefaultCacheProbe()
        self._pending: set[asyncio.Task[None]] = set()

    @classmethod
    def from_settings(
        cls, settings: CacheSettings, probe: CacheProbe | None = None
    ) -> CacheClient:
        """Create a client for the configured host.

        No connection is opened until the first command.
        """
        client = redis.Redis(
            host=settings.redis_ip,
            port=settings.redis_port,
            decode_responses=True,  # return str, not bytes
        )
        cache = cls(client, settings.redis_ip, settings.redis_port, probe=probe)
        cache._probe.cache_client_created(
            host=settings.redis_ip, port=settings.redis_port
        )
        return cache

    def set(self, key: str, value: str) -> asyncio.Task[None]:
        """Write a value without waiting for the result.

        Returns:
            The background task, for callers (and tests) that want to await it.
        """
        task = asyncio.create_task(self._set(key, value))
        # Keep a reference so the task is not garbage collected mid-flight
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _set(self, key: str, value: str) -> None:
        try:
            await self._client.set(key, value)
        except RedisError as e:
            self._probe.cache_command_failed(command="SET", key=key, error=e)
            return
        self._probe.cache_value_set(key=key)

    async def get(self, key: str) -> str | None:
        """Read a value.

        Writes issued earlier through ``set`` are applied first, so a read
        sees them as it would on a single ordered connection.

        Returns:
            The stored value, or None if the key is missing or the cache
            could not be reached.
        """
        if self._pending:
            await asyncio.wait(set(self._pending))
        try:
            return await self._client.get(key)
        except RedisError as e:
            self._probe.cache_command_failed(command="GET", key=key, error=e)
            return None

    async def close(self) -> None:
        """Cancel pending writes and close the connection."""
        for task in list(self._pending):
            task.cancel()
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
        await self._client.aclose()
        self._probe.cache_client_closed()
