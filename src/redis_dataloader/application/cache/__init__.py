"""Application cache – key encoding, store port and payload codecs."""
from redis_dataloader.application.cache.codecs import JsonCodec
from redis_dataloader.application.cache.keys import CacheKeyEncoder, encode_cache_key
from redis_dataloader.application.cache.store import (
    DEFAULT_NOT_FOUND_TTL,
    NOT_FOUND_SENTINEL,
    CacheStore,
)

__all__ = [
    "DEFAULT_NOT_FOUND_TTL",
    "NOT_FOUND_SENTINEL",
    "CacheKeyEncoder",
    "CacheStore",
    "JsonCodec",
    "encode_cache_key",
]
