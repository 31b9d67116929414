"""Builds a ``MemoryConfigStore`` from a JSON config file.

The file holds one object per namespace::

    {
      "billing": {
        "retries": 3,
        "sandbox": "true",
        "database_url": {"system": "BILLING_DATABASE_URL"}
      }
    }

An object with a single ``"system"`` member becomes a ``SystemEnv`` redirect.
Other values are stored as parsed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from appconf.lookup.values import SystemEnv
from appconf.services.store.memory_store import MemoryConfigStore

REDIRECT_TAG = "system"


def load_config_file(path: str | Path) -> MemoryConfigStore:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"config file not found at {config_path}")
    try:
        data = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"{config_path} is not valid JSON: {exc}") from exc
    return build_store(data, source=str(config_path))


def build_store(data: Any, source: str = "<config>") -> MemoryConfigStore:
    if not isinstance(data, dict):
        raise ValueError(f"{source}: top level must be an object of namespaces")
    store = MemoryConfigStore()
    for namespace, entries in data.items():
        if not isinstance(entries, dict):
            raise ValueError(f"{source}: namespace '{namespace}' must be an object")
        for key, value in entries.items():
            store.put(namespace, key, _decode_value(value))
    return store


def _decode_value(value: Any) -> Any:
    if isinstance(value, dict) and set(value) == {REDIRECT_TAG}:
        name = value[REDIRECT_TAG]
        if not isinstance(name, str) or not name:
            raise ValueError(f"redirect target must be a non-empty string, got {name!r}")
        return SystemEnv(name)
    return value
