from __future__ import annotations

import os

from appconf.services.environment.interface import EnvironmentInterface


class OsEnvironment(EnvironmentInterface):
    """Reads the process environment at call time, with optional overrides."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._overrides = dict(overrides or {})

    def lookup(self, name: str) -> str | None:
        if name in self._overrides:
            return self._overrides[name]
        return os.environ.get(name)
