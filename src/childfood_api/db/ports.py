"""Storage port for small keyed documents (profiles, meal plans)."""

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStore(ABC):
    """
    Get/set/delete of JSON-compatible values by key.

    Services depend on this interface only, so they can run against
    MongoDB in production and an in-memory store in tests.
    """

    @abstractmethod
    async def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under `key`, or `default`."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store `value` under `key`, replacing any previous value."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove `key`. Returns True if it existed."""
        ...
