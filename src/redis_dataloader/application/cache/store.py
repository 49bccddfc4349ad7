"""Application cache – CacheStore port and wire-level constants."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = [
    "DEFAULT_NOT_FOUND_TTL",
    "NOT_FOUND_SENTINEL",
    "CacheStore",
]

# Stored in place of a payload when the source confirmed the key is absent.
NOT_FOUND_SENTINEL = "___NOTFOUND___"

# Seconds a negative (not-found) entry lives in the store.
DEFAULT_NOT_FOUND_TTL = 60


@runtime_checkable
class CacheStore(Protocol):
    """Port: string key/value store with per-entry expiry.

    Implementations must be safe for concurrent use from one event loop.
    """

    async def get(self, key: str) -> str | None: ...
    async def set(self, key: str, value: str, ttl: int) -> bool: ...  # True when stored
    async def delete(self, key: str) -> int: ...  # 1 when removed, else 0
