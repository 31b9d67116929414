from abc import ABC, abstractmethod


class EnvironmentInterface(ABC):
    """Read access to environment variables."""

    @abstractmethod
    def lookup(self, name: str) -> str | None:
        """Return the variable's value, or None if it is not set."""
        ...
