"""Application-layer errors — misuse of the public API."""

from __future__ import annotations

from redis_dataloader.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UsageError(ApplicationError):
    """The caller invoked an operation incorrectly (programmer error).

    Raised before any I/O takes place and never retried.
    """

    default_code = "usage_error"


__all__ = [
    "ApplicationError",
    "UsageError",
]
