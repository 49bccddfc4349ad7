"""Application cache – CacheKeyEncoder."""
from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

__all__ = ["CacheKeyEncoder", "encode_cache_key"]

K = TypeVar("K")


def encode_cache_key(namespace: str, key: Any, key_fn: Callable[[Any], Any] | None = None) -> str:
    """Return ``"<namespace>:<normalized key>"``.

    *key_fn* must be a pure function of the key: two keys it maps to the same
    value share one cache entry and one batch-fetch slot.
    """
    normalized = key_fn(key) if key_fn is not None else key
    return f"{namespace}:{normalized}"


class CacheKeyEncoder(Generic[K]):
    """Deterministic mapping from caller keys to namespaced cache-store keys."""

    def __init__(
        self,
        name: str,
        suffix: str | None = None,
        key_fn: Callable[[K], str | int] | None = None,
    ) -> None:
        self._namespace = f"{name}-{suffix}" if suffix else name
        self._key_fn = key_fn

    @property
    def namespace(self) -> str:
        return self._namespace

    def encode(self, key: K) -> str:
        return encode_cache_key(self._namespace, key, self._key_fn)

    __call__ = encode
