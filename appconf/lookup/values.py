"""Value types shared by stores and the resolver.

A stored value is either a literal (str, int, bool, or anything the host put
there) or a ``SystemEnv`` marker that redirects the lookup to an environment
variable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SystemEnv:
    """Redirect marker: resolve from the environment variable *name*."""

    name: str


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Outcome of a lookup: success carrying a value, or failure with none."""

    ok: bool
    value: T | None = None

    @classmethod
    def success(cls, value: T) -> LookupResult[T]:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls) -> LookupResult[Any]:
        return cls(ok=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LookupResult):
            return NotImplemented
        # success(1) and success(True) are different results
        return (
            self.ok == other.ok
            and type(self.value) is type(other.value)
            and self.value == other.value
        )

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return f"LookupResult.success({self.value!r})"
        return "LookupResult.failure()"
