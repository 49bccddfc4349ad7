"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── NotFoundError
    │       └── ModelNotFoundError
    ├── ApplicationError     (application.py)
    │   └── UsageError
    └── InfrastructureError  (infrastructure.py)
        ├── CacheStoreError
        └── SerializationError
"""

from redis_dataloader.kernel.errors.application import ApplicationError, UsageError
from redis_dataloader.kernel.errors.base import BaseError
from redis_dataloader.kernel.errors.domain import (
    DomainError,
    ModelNotFoundError,
    NotFoundError,
)
from redis_dataloader.kernel.errors.infrastructure import (
    CacheStoreError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CacheStoreError",
    "DomainError",
    "InfrastructureError",
    "ModelNotFoundError",
    "NotFoundError",
    "SerializationError",
    "UsageError",
]
