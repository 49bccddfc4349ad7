"""Redis adapter – CacheStore backed by redis-py's asyncio client."""
from redis_dataloader.adapters.redis.cache import RedisCache

__all__ = ["RedisCache"]
