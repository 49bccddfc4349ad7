"""Application dataloader – batched, deduplicating cache-through loading."""
from redis_dataloader.application.dataloader.loader import BatchLoadFn, RedisDataLoader
from redis_dataloader.application.dataloader.registry import NameRegistry, known_names

__all__ = ["BatchLoadFn", "NameRegistry", "RedisDataLoader", "known_names"]
