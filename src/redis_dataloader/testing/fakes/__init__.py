"""Testing fakes – in-memory doubles for the loader's collaborators."""
from redis_dataloader.kernel.time import FrozenClock
from redis_dataloader.testing.fakes.batch import RecordingBatchLoadFn
from redis_dataloader.testing.fakes.cache_store import InMemoryCacheStore
from redis_dataloader.testing.fakes.clock import FakeClock

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryCacheStore",
    "RecordingBatchLoadFn",
]
