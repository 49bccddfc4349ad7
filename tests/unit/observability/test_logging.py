"""Unit tests for observability logging."""

from __future__ import annotations

import asyncio
import logging

import structlog
from structlog.testing import capture_logs

from redis_dataloader.application.cache import JsonCodec
from redis_dataloader.application.dataloader import NameRegistry, RedisDataLoader
from redis_dataloader.observability.logging import JsonLoggerFactory, Logger, get_logger
from redis_dataloader.testing import InMemoryCacheStore, RecordingBatchLoadFn


class TestGetLogger:
    def test_returns_structlog_logger(self) -> None:
        logger = get_logger("redis_dataloader.test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("x", loader="users").info("hello")
        assert logs == [{"loader": "users", "event": "hello", "log_level": "info"}]

    def test_satisfies_protocol(self) -> None:
        logger: Logger = get_logger("x")
        assert callable(logger.warning)


class TestJsonLoggerFactory:
    def test_configure_installs_single_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            JsonLoggerFactory.configure(level=logging.WARNING)
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
            assert root.level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()


class TestLoaderDefaultLogger:
    def _loader(self, registry: NameRegistry) -> RedisDataLoader:
        codec = JsonCodec()
        return RedisDataLoader(
            "products",
            RecordingBatchLoadFn({"p1": 1}),
            store=InMemoryCacheStore(),
            ttl=300,
            serialize=codec.serialize,
            deserialize=codec.deserialize,
            registry=registry,
        )

    def test_collision_warning_goes_to_structlog(self) -> None:
        registry = NameRegistry()
        with capture_logs() as logs:
            self._loader(registry)
            self._loader(registry)
        warnings = [entry for entry in logs if entry["log_level"] == "warning"]
        assert len(warnings) == 1
        assert warnings[0]["namespace"] == "products"

    def test_cycle_emits_debug_events(self) -> None:
        with capture_logs() as logs:
            loader = self._loader(NameRegistry())
            asyncio.run(loader.load_many(["p1"]))
        events = [entry["event"] for entry in logs]
        assert "loading from source" in events
        assert "cycle resolved" in events
