"""Application dataloader – process-wide registry of loader namespaces."""
from __future__ import annotations

import threading

__all__ = ["NameRegistry", "known_names"]


class NameRegistry:
    """Remembers which cache namespaces were already claimed in this process.

    Purely diagnostic: a collision only produces a warning, two loaders with
    the same namespace keep working (and share cache entries).
    """

    def __init__(self) -> None:
        self._names: set[str] = set()
        self._lock = threading.Lock()

    def register(self, name: str) -> bool:
        """Record *name*; return ``False`` when it was already registered."""
        with self._lock:
            if name in self._names:
                return False
            self._names.add(name)
            return True

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def reset(self) -> None:
        with self._lock:
            self._names.clear()


known_names = NameRegistry()
