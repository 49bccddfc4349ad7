"""Domain errors — outcomes about the data itself rather than the plumbing."""

from __future__ import annotations

import json
from typing import Any

from redis_dataloader.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated or a domain outcome is negative."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested item does not exist in the underlying source.

    A loader treats this type as a cacheable outcome: batch functions return
    it (rather than raising it) for keys that are confirmed absent.
    """

    default_code = "not_found"

    def __init__(
        self,
        identifier: Any,
        message: str = "Not found",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.identifier = identifier

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["identifier"] = self.identifier
        return base


class ModelNotFoundError(NotFoundError):
    """Not-found outcome labelled with the name of the source entity.

    *model* may be a class (its ``__name__`` is used) or a plain string.
    """

    default_code = "model_not_found"

    def __init__(self, model: type | str, identifier: Any, **kwargs: Any) -> None:
        model_name = model if isinstance(model, str) else model.__name__
        rendered = json.dumps(identifier, default=str)
        super().__init__(
            identifier,
            f"{model_name} not found for identifier {rendered}",
            **kwargs,
        )
        self.model_name = model_name


__all__ = [
    "DomainError",
    "ModelNotFoundError",
    "NotFoundError",
]
