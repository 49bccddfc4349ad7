"""Infrastructure errors — cache store and payload encoding failures."""

from __future__ import annotations

from typing import Any

from redis_dataloader.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a domain outcome."""

    default_code = "infrastructure_error"


class CacheStoreError(InfrastructureError):
    """A cache store command failed (connection loss, timeout, cluster error…)."""

    default_code = "cache_store_error"

    def __init__(
        self,
        operation: str,
        key: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Cache {operation} failed for '{key}'", **kwargs)
        self.operation = operation
        self.key = key


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a cached payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "CacheStoreError",
    "InfrastructureError",
    "SerializationError",
]
