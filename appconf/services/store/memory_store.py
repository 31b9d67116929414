from __future__ import annotations

from typing import Any

from appconf.services.store.interface import ConfigStoreInterface


class MemoryConfigStore(ConfigStoreInterface):
    """Dict-backed store populated by the host application at startup."""

    def __init__(self, entries: dict[str, dict[str, Any]] | None = None) -> None:
        # namespace -> key -> value
        self._data: dict[str, dict[str, Any]] = {}
        for namespace, values in (entries or {}).items():
            self._data[namespace] = dict(values)

    def fetch(self, namespace: str, key: str) -> Any | None:
        return self._data.get(namespace, {}).get(key)

    def put(self, namespace: str, key: str, value: Any) -> None:
        self._data.setdefault(namespace, {})[key] = value

    def namespaces(self) -> list[str]:
        return list(self._data)

    def __repr__(self) -> str:
        return f"MemoryConfigStore({self._data})"
