"""Testing support – in-memory doubles for the store, the clock and batch functions.

Typical use::

    from redis_dataloader.testing import FakeClock, InMemoryCacheStore

    clock = FakeClock()
    store = InMemoryCacheStore(clock)
"""

from redis_dataloader.testing.fakes import (
    FakeClock,
    FrozenClock,
    InMemoryCacheStore,
    RecordingBatchLoadFn,
)

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryCacheStore",
    "RecordingBatchLoadFn",
]
