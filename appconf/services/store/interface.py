from abc import ABC, abstractmethod
from typing import Any


class ConfigStoreInterface(ABC):
    """Read access to application configuration keyed by (namespace, key)."""

    @abstractmethod
    def fetch(self, namespace: str, key: str) -> Any | None:
        """Return the stored value, or None if the entry does not exist."""
        ...
