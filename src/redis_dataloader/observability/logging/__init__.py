"""Observability – structured logging ports and helpers."""
from redis_dataloader.observability.logging.factory import JsonLoggerFactory
from redis_dataloader.observability.logging.processors import get_logger
from redis_dataloader.observability.logging.protocol import Logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "get_logger",
]
