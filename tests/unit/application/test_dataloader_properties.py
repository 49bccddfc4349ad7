"""Property-based tests for RedisDataLoader resolution cycles."""
from __future__ import annotations

import asyncio

from hypothesis import given, settings

from redis_dataloader.application.cache import JsonCodec
from redis_dataloader.application.dataloader import NameRegistry, RedisDataLoader
from redis_dataloader.kernel.errors import NotFoundError
from redis_dataloader.testing import FakeClock, InMemoryCacheStore, RecordingBatchLoadFn
from redis_dataloader.testing.generators import key_batch_strategy


class _SilentLogger:
    def debug(self, event: str, **kw: object) -> None: ...
    def info(self, event: str, **kw: object) -> None: ...
    def warning(self, event: str, **kw: object) -> None: ...
    def error(self, event: str, **kw: object) -> None: ...


def _source_answer(key: str) -> object:
    # keys starting with a vowel are absent from the source
    return NotFoundError(key) if key[0] in "ae" else f"value-{key}"


def _loader(cache_key_fn=None) -> tuple[RedisDataLoader, RecordingBatchLoadFn]:  # type: ignore[no-untyped-def]
    codec = JsonCodec()
    batch = RecordingBatchLoadFn({}, missing=_source_answer)
    loader = RedisDataLoader(
        "prop",
        batch,
        store=InMemoryCacheStore(FakeClock()),
        ttl=3600,
        serialize=codec.serialize,
        deserialize=codec.deserialize,
        cache_key_fn=cache_key_fn,
        logger=_SilentLogger(),
        registry=NameRegistry(),
    )
    return loader, batch


def _outcome(result: object) -> object:
    if isinstance(result, NotFoundError):
        return ("not-found", result.identifier)
    return result


@settings(max_examples=50, deadline=None)
@given(key_batch_strategy())
def test_results_aligned_with_input(keys: list[str]) -> None:
    loader, _ = _loader()
    results = asyncio.run(loader.load_many(keys))
    assert len(results) == len(keys)
    assert [_outcome(r) for r in results] == [_outcome(_source_answer(k)) for k in keys]


@settings(max_examples=50, deadline=None)
@given(key_batch_strategy())
def test_fetch_receives_unique_keys_in_first_occurrence_order(keys: list[str]) -> None:
    loader, batch = _loader()
    asyncio.run(loader.load_many(keys))
    assert batch.calls == [list(dict.fromkeys(keys))]


@settings(max_examples=50, deadline=None)
@given(key_batch_strategy(), key_batch_strategy())
def test_second_cycle_fetches_only_new_keys(first: list[str], second: list[str]) -> None:
    loader, batch = _loader()
    asyncio.run(loader.load_many(first))
    asyncio.run(loader.load_many(second))
    new_keys = [k for k in dict.fromkeys(second) if k not in set(first)]
    assert batch.calls[1:] == ([new_keys] if new_keys else [])


@settings(max_examples=50, deadline=None)
@given(key_batch_strategy(alphabet="aBbC"))
def test_duplicates_after_normalisation_resolve_identically(keys: list[str]) -> None:
    loader, batch = _loader(cache_key_fn=str.lower)
    results = asyncio.run(loader.load_many(keys))
    by_normalised: dict[str, object] = {}
    for key, result in zip(keys, results):
        by_normalised.setdefault(key.lower(), result)
        assert by_normalised[key.lower()] is result
    assert len(batch.calls[0]) == len({k.lower() for k in keys})
