"""A small thread-safe dependency injection container."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from typing import Any

Getter = Callable[[str], Any]
Constructor = Callable[[Getter], Any]


class Container:
    """Maps service names to constructors and caches each constructed instance.

    A constructor receives the container's ``get`` so it can look up the
    services it depends on. An instance, once built, is returned for every
    later lookup of the same name until the name is updated.
    """

    def __init__(self, constructors: Mapping[str, Constructor] | None = None) -> None:
        self._lock = threading.RLock()
        self._constructors: dict[str, Constructor] = {}
        self._instances: dict[str, Any] = {}
        if constructors:
            self.update(constructors)

    def update(self, constructors: Mapping[str, Constructor]) -> None:
        """Add or replace constructors; replaced services are rebuilt on next lookup."""
        with self._lock:
            for name, constructor in constructors.items():
                self._constructors[name] = constructor
                self._instances.pop(name, None)

    def get(self, name: str) -> Any:
        """Return the instance for ``name``, building it if needed, or None if unknown."""
        with self._lock:
            constructor = self._constructors.get(name)
            if constructor is None:
                return None
            instance = self._instances.get(name)
            if instance is None:
                instance = constructor(self.get)
                self._instances[name] = instance
            return instance


def type_instance_to_name(value: Any) -> str:
    """A unique name for the type of ``value`` (or for ``value`` itself if it is a class)."""
    cls = value if isinstance(value, type) else type(value)
    return f"{cls.__module__}.{cls.__qualname__}"