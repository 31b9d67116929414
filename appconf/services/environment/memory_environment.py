from __future__ import annotations

from appconf.services.environment.interface import EnvironmentInterface


class MemoryEnvironment(EnvironmentInterface):
    """Fixed variable table for unit testing."""

    def __init__(self, variables: dict[str, str] | None = None) -> None:
        self.variables: dict[str, str] = dict(variables or {})

    def lookup(self, name: str) -> str | None:
        return self.variables.get(name)
