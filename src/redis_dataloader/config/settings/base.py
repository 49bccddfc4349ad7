"""Config settings – Settings base class and DataLoaderSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from redis_dataloader.application.cache.store import DEFAULT_NOT_FOUND_TTL
from redis_dataloader.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DataLoaderSettings(Settings):
    """Connection and expiry settings for :class:`RedisDataLoader`.

    Read from ``DATALOADER_REDIS_URL``, ``DATALOADER_TTL``,
    ``DATALOADER_NOT_FOUND_TTL`` and ``DATALOADER_SUFFIX``.
    """

    _prefix: ClassVar[str] = "DATALOADER"

    redis_url: str = "redis://localhost:6379/0"
    ttl: int = 3600
    not_found_ttl: int = DEFAULT_NOT_FOUND_TTL
    suffix: str | None = None

    def _validate(self) -> None:
        if self.ttl <= 0:
            raise InvalidSettingValueError("ttl", self.ttl, "must be positive")
        if self.not_found_ttl <= 0:
            raise InvalidSettingValueError("not_found_ttl", self.not_found_ttl, "must be positive")
        if self.not_found_ttl >= self.ttl:
            raise InvalidSettingValueError(
                "not_found_ttl", self.not_found_ttl, f"must be shorter than ttl ({self.ttl})"
            )


__all__ = ["DataLoaderSettings", "Settings"]
