"""conftest.py for benchmarks.

Provides a reusable event loop for async benchmarks.

The ``event_loop`` fixture is session-scoped so every benchmark in the
session shares a single asyncio event loop, which keeps loop start-up out of
the measured time.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(event_loop):
    """Execute a coroutine in the session event loop.

    Usage inside a benchmark::

        def test_something(benchmark, run_async):
            benchmark(lambda: run_async(some_coroutine()))
    """

    def _run(coro):
        return event_loop.run_until_complete(coro)

    return _run
