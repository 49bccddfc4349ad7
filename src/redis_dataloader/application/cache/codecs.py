"""Application cache – JSON payload codec."""
from __future__ import annotations

import json
from typing import Any, Callable

from redis_dataloader.kernel.errors import SerializationError

__all__ = ["JsonCodec"]


class JsonCodec:
    """Serializer / deserializer pair storing values as JSON text.

    Pass ``codec.serialize`` and ``codec.deserialize`` to a loader.  *default*
    is forwarded to :func:`json.dumps` for non-native types and *object_hook*
    to :func:`json.loads` to rebuild them.
    """

    def __init__(
        self,
        default: Callable[[Any], Any] | None = None,
        object_hook: Callable[[dict[str, Any]], Any] | None = None,
    ) -> None:
        self._default = default
        self._object_hook = object_hook

    def serialize(self, value: Any) -> str:
        try:
            return json.dumps(value, default=self._default, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot serialize {type(value).__name__}",
                payload_type=type(value).__name__,
                cause=exc,
            ) from exc

    def deserialize(self, key: Any, raw: str) -> Any:  # noqa: ARG002
        try:
            return json.loads(raw, object_hook=self._object_hook)
        except ValueError as exc:
            raise SerializationError(f"Cannot deserialize payload for key {key!r}", cause=exc) from exc
