"""Application dataloader – RedisDataLoader.

One call to :meth:`RedisDataLoader.load_many` is one *resolution cycle*:

1. keys are encoded and deduplicated by cache key;
2. every unique cache key is read from the store concurrently (one ``GET``
   per key, never ``MGET``, so a sharded store works);
3. the misses are fetched from the source with a single batch call;
4. values are written back with the standard TTL, not-found outcomes as a
   sentinel with the shorter negative TTL, other errors are not cached;
5. outcomes are fanned back out to every input position.

The loader does not collect keys over time itself.  Hand the instance (it is
callable) to whatever batch-collection layer schedules your requests.
"""
from __future__ import annotations

import asyncio
import dataclasses
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Sequence, TypeVar

from redis_dataloader.application.cache.codecs import JsonCodec
from redis_dataloader.application.cache.keys import CacheKeyEncoder
from redis_dataloader.application.cache.store import (
    DEFAULT_NOT_FOUND_TTL,
    NOT_FOUND_SENTINEL,
    CacheStore,
)
from redis_dataloader.application.dataloader.registry import NameRegistry, known_names
from redis_dataloader.kernel.errors import NotFoundError, UsageError
from redis_dataloader.observability.logging import Logger, get_logger

if TYPE_CHECKING:
    from redis_dataloader.config.settings import DataLoaderSettings

__all__ = ["BatchLoadFn", "RedisDataLoader"]

K = TypeVar("K")
V = TypeVar("V")

BatchLoadFn = Callable[[list[K]], Awaitable[Sequence[V | BaseException]]]

_MISS = object()


@dataclasses.dataclass
class _Entry(Generic[K]):
    """One unique cache key within a resolution cycle."""

    cache_key: str
    key: K  # first occurrence among the requested keys
    positions: list[int]


class RedisDataLoader(Generic[K, V]):
    """Cache-through batch loader over a :class:`CacheStore`.

    Parameters
    ----------
    name:
        Cache namespace; every entry is stored under ``name[-suffix]:key``.
    batch_load_fn:
        ``async (keys) -> results``.  Receives unique keys and must return one
        value or exception per key, in the same order.  Return a
        :class:`NotFoundError` for keys confirmed absent so they are cached
        negatively.
    store:
        Shared key/value store (see :class:`~redis_dataloader.adapters.redis.RedisCache`).
    ttl:
        Seconds a fetched value stays cached.
    serialize / deserialize:
        ``serialize(value) -> str`` and ``deserialize(key, raw) -> value``.
    suffix:
        Optional namespace suffix, e.g. a schema version.
    cache_key_fn:
        Pure normalisation ``key -> str | int`` used instead of ``str(key)``.
    not_found:
        ``key -> exception`` built when the store holds a not-found sentinel.
    not_found_ttl:
        Seconds a not-found sentinel stays cached; must be shorter than *ttl*.
    logger:
        Structured logger; defaults to the package structlog logger.
    """

    def __init__(
        self,
        name: str,
        batch_load_fn: BatchLoadFn[K, V],
        *,
        store: CacheStore,
        ttl: int,
        serialize: Callable[[V], str],
        deserialize: Callable[[K, str], V],
        suffix: str | None = None,
        cache_key_fn: Callable[[K], str | int] | None = None,
        not_found: Callable[[K], BaseException] | None = None,
        not_found_ttl: int = DEFAULT_NOT_FOUND_TTL,
        logger: Logger | None = None,
        registry: NameRegistry | None = None,
    ) -> None:
        if ttl <= 0:
            raise UsageError(f"ttl must be positive, got {ttl}")
        if not 0 < not_found_ttl < ttl:
            raise UsageError(f"not_found_ttl must be positive and shorter than ttl ({ttl}), got {not_found_ttl}")

        self._encoder: CacheKeyEncoder[K] = CacheKeyEncoder(name, suffix, cache_key_fn)
        self._batch_load_fn = batch_load_fn
        self._store = store
        self._ttl = ttl
        self._not_found_ttl = not_found_ttl
        self._serialize = serialize
        self._deserialize = deserialize
        self._not_found = not_found
        self._log: Any = logger or get_logger(__name__, loader=self.name)

        if (registry or known_names).register(self.name):
            self._log.debug("new loader", namespace=self.name)
        else:
            self._log.warning("loader namespace already in use", namespace=self.name)

    @classmethod
    def from_settings(
        cls,
        name: str,
        batch_load_fn: BatchLoadFn[K, V],
        settings: DataLoaderSettings,
        *,
        store: CacheStore | None = None,
        serialize: Callable[[V], str] | None = None,
        deserialize: Callable[[K, str], V] | None = None,
        **kwargs: Any,
    ) -> "RedisDataLoader[K, V]":
        """Build a loader from :class:`DataLoaderSettings`.

        Without an explicit *store* a :class:`RedisCache` is opened on
        ``settings.redis_url``; without a codec, values are stored as JSON.
        """
        if store is None:
            from redis_dataloader.adapters.redis import RedisCache

            store = RedisCache(settings.redis_url)
        codec = JsonCodec()
        return cls(
            name,
            batch_load_fn,
            store=store,
            ttl=settings.ttl,
            not_found_ttl=settings.not_found_ttl,
            suffix=settings.suffix,
            serialize=serialize or codec.serialize,
            deserialize=deserialize or codec.deserialize,
            **kwargs,
        )

    @property
    def name(self) -> str:
        return self._encoder.namespace

    def cache_key(self, key: K) -> str:
        return self._encoder.encode(key)

    # ------------------------------------------------------------------
    # Resolution cycle
    # ------------------------------------------------------------------

    async def load_many(self, keys: Sequence[K]) -> list[V | BaseException]:
        """Resolve *keys*, returning one value or exception per input position."""
        if not keys:
            raise UsageError("load_many() requires at least one key")

        entries = self._plan(keys)
        resolved = await self._read_cached(entries)

        misses = [entry for entry in entries if resolved[entry.cache_key] is _MISS]
        if misses:
            resolved.update(await self._fetch_and_store(misses))

        self._log.debug("cycle resolved", requested=len(keys), unique=len(entries), fetched=len(misses))
        results: list[Any] = [None] * len(keys)
        for entry in entries:
            outcome = resolved[entry.cache_key]
            for position in entry.positions:
                results[position] = outcome
        return results

    __call__ = load_many

    def _plan(self, keys: Sequence[K]) -> list[_Entry[K]]:
        by_cache_key: dict[str, _Entry[K]] = {}
        for position, key in enumerate(keys):
            cache_key = self._encoder.encode(key)
            entry = by_cache_key.get(cache_key)
            if entry is None:
                by_cache_key[cache_key] = _Entry(cache_key, key, [position])
            else:
                entry.positions.append(position)
        return list(by_cache_key.values())

    async def _read_cached(self, entries: list[_Entry[K]]) -> dict[str, Any]:
        outcomes = await asyncio.gather(*(self._read_one(entry) for entry in entries))
        return {entry.cache_key: outcome for entry, outcome in zip(entries, outcomes)}

    async def _read_one(self, entry: _Entry[K]) -> Any:
        self._log.debug("reading from cache", cache_key=entry.cache_key)
        try:
            raw = await self._store.get(entry.cache_key)
        except Exception as exc:  # noqa: BLE001 - an unreadable entry counts as a miss
            self._log.warning("cache read failed", cache_key=entry.cache_key, error=repr(exc))
            return _MISS
        if raw is None:
            return _MISS
        if raw == NOT_FOUND_SENTINEL:
            return self._not_found_for(entry.key)
        try:
            return self._deserialize(entry.key, raw)
        except Exception as exc:  # noqa: BLE001
            self._log.warning("cached payload unreadable", cache_key=entry.cache_key, error=repr(exc))
            return _MISS

    def _not_found_for(self, key: K) -> BaseException:
        if self._not_found is not None:
            return self._not_found(key)
        return NotFoundError(key, "Not found (redis cache)")

    async def _fetch_and_store(self, misses: list[_Entry[K]]) -> dict[str, Any]:
        self._log.debug("loading from source", cache_keys=[entry.cache_key for entry in misses])
        results = list(await self._batch_load_fn([entry.key for entry in misses]))
        if len(results) != len(misses):
            raise UsageError(
                f"batch_load_fn must return one result per key: got {len(results)} for {len(misses)} keys"
            )

        writes: list[Awaitable[bool]] = []
        for entry, result in zip(misses, results):
            if isinstance(result, NotFoundError):
                writes.append(self._write(entry.cache_key, NOT_FOUND_SENTINEL, self._not_found_ttl))
            elif not isinstance(result, BaseException):
                writes.append(self._write_value(entry.cache_key, result))
        if writes:
            await asyncio.gather(*writes)

        return {entry.cache_key: result for entry, result in zip(misses, results)}

    # ------------------------------------------------------------------
    # Explicit cache maintenance
    # ------------------------------------------------------------------

    async def clear(self, *keys: K) -> int:
        """Delete the cache entries of *keys*; return how many existed."""
        if not keys:
            raise UsageError("clear() requires at least one key")
        removed = await asyncio.gather(*(self._store.delete(self._encoder.encode(key)) for key in keys))
        return sum(removed)

    def clear_all(self) -> None:
        raise UsageError(f"clear_all() is not supported on shared store namespace '{self.name}'")

    async def prime(self, key: K, value: V | BaseException) -> bool:
        """Store *value* for *key*; exceptions are never primed."""
        if isinstance(value, BaseException):
            return False
        return await self._write_value(self._encoder.encode(key), value)

    async def _write_value(self, cache_key: str, value: V) -> bool:
        try:
            payload = self._serialize(value)
        except Exception as exc:  # noqa: BLE001
            self._log.warning("cache serialization failed", cache_key=cache_key, error=repr(exc))
            return False
        return await self._write(cache_key, payload, self._ttl)

    async def _write(self, cache_key: str, payload: str, ttl: int) -> bool:
        self._log.debug("saving to cache", cache_key=cache_key, ttl=ttl)
        try:
            stored = await self._store.set(cache_key, payload, ttl)
        except Exception as exc:  # noqa: BLE001 - the caller already has its result
            self._log.warning("cache write failed", cache_key=cache_key, error=repr(exc))
            return False
        if not stored:
            self._log.warning("cache write rejected", cache_key=cache_key)
        return bool(stored)
