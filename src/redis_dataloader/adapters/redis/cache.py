"""Redis adapter – RedisCache."""
from __future__ import annotations

from typing import Any

from redis_dataloader.kernel.errors import CacheStoreError


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'redis-dataloader[redis]' to use the Redis adapter") from exc


class RedisCache:
    """Async Redis :class:`~redis_dataloader.application.cache.CacheStore`.

    Every command addresses a single key, so the store is safe to point at a
    Redis Cluster.  Responses are decoded to ``str``.
    """

    def __init__(self, url: str, **kwargs: Any) -> None:
        aioredis = _require_redis()
        kwargs.setdefault("decode_responses", True)
        self._client = aioredis.from_url(url, **kwargs)

    @classmethod
    def from_client(cls, client: Any) -> "RedisCache":
        """Wrap an already-configured ``redis.asyncio`` client (or cluster client)."""
        cache = cls.__new__(cls)
        cache._client = client
        return cache

    async def get(self, key: str) -> str | None:
        try:
            value = await self._client.get(key)
        except Exception as exc:
            raise CacheStoreError("get", key, cause=exc) from exc
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def set(self, key: str, value: str, ttl: int) -> bool:
        try:
            result = await self._client.set(key, value, ex=ttl)
        except Exception as exc:
            raise CacheStoreError("set", key, cause=exc) from exc
        return bool(result)

    async def delete(self, key: str) -> int:
        try:
            return int(await self._client.delete(key))
        except Exception as exc:
            raise CacheStoreError("delete", key, cause=exc) from exc

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisCache"]
