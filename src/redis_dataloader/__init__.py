"""
redis_dataloader – batched, deduplicating cache-through loading over Redis.

Import path convention::

    from redis_dataloader.application.dataloader import RedisDataLoader
    from redis_dataloader.adapters.redis import RedisCache
    from redis_dataloader.kernel.errors import NotFoundError, ModelNotFoundError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
