"""Resolves (namespace, key) pairs against a config store and the environment.

Every accessor family comes in two calling conventions:

    get*(namespace, key[, default])      -> LookupResult
    require*(namespace, key[, default])  -> bare value

Passing a default turns a failed lookup into a success carrying the default.
``require*`` without a default raises ``ConfigurationError`` on failure.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from appconf.lookup.errors import ConfigurationError
from appconf.lookup.values import LookupResult, SystemEnv
from appconf.services.environment.interface import EnvironmentInterface
from appconf.services.logger.interface import LoggingInterface
from appconf.services.logger.noop_logger import NoopLogger
from appconf.services.store.interface import ConfigStoreInterface

# Optional sign followed by ASCII digits; anything after the prefix is ignored.
_LEADING_INT = re.compile(r"[+-]?[0-9]+")

_UNSET: Any = object()


def parse_leading_int(text: str) -> int | None:
    """Parse the integer literal at the start of *text*, or None if there is none."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    try:
        return int(match.group())
    except ValueError:
        # over the interpreter's int string conversion digit limit
        return None


def coerce_integer(value: Any) -> LookupResult[int]:
    # bool is an int subclass but never counts as one here
    if isinstance(value, bool):
        return LookupResult.failure()
    if isinstance(value, int):
        return LookupResult.success(value)
    if isinstance(value, str):
        number = parse_leading_int(value)
        if number is not None:
            return LookupResult.success(number)
    return LookupResult.failure()


def coerce_boolean(value: Any) -> LookupResult[bool]:
    if isinstance(value, bool):
        return LookupResult.success(value)
    if value == "true":
        return LookupResult.success(True)
    if value == "false":
        return LookupResult.success(False)
    return LookupResult.failure()


class Resolver:
    """Typed configuration lookup with environment-variable redirection."""

    def __init__(
        self,
        store: ConfigStoreInterface,
        env: EnvironmentInterface,
        logger: LoggingInterface | None = None,
    ) -> None:
        self._store = store
        self._env = env
        self._log = logger or NoopLogger()

    # ── Untyped ───────────────────────────────────────────────────────────

    def get(self, namespace: str, key: str, default: Any = _UNSET) -> LookupResult[Any]:
        return _or_default(self._lookup(namespace, key), default)

    def require(self, namespace: str, key: str, default: Any = _UNSET) -> Any:
        return self._unwrap(self._lookup(namespace, key), namespace, key, default)

    # ── Integer ───────────────────────────────────────────────────────────

    def get_integer(self, namespace: str, key: str, default: Any = _UNSET) -> LookupResult[int]:
        result = self._typed(namespace, key, coerce_integer, "integer")
        return _or_default(result, default)

    def require_integer(self, namespace: str, key: str, default: Any = _UNSET) -> int:
        result = self._typed(namespace, key, coerce_integer, "integer")
        return self._unwrap(result, namespace, key, default, expected="an integer")

    # ── Boolean ───────────────────────────────────────────────────────────

    def get_boolean(self, namespace: str, key: str, default: Any = _UNSET) -> LookupResult[bool]:
        result = self._typed(namespace, key, coerce_boolean, "boolean")
        return _or_default(result, default)

    def require_boolean(self, namespace: str, key: str, default: Any = _UNSET) -> bool:
        result = self._typed(namespace, key, coerce_boolean, "boolean")
        return self._unwrap(result, namespace, key, default, expected="a boolean")

    # ── Internal ──────────────────────────────────────────────────────────

    def _lookup(self, namespace: str, key: str) -> LookupResult[Any]:
        value = self._store.fetch(namespace, key)
        if value is None:
            return LookupResult.failure()
        if isinstance(value, SystemEnv):
            env_value = self._env.lookup(value.name)
            if env_value is None:
                self._log.debug(
                    "Redirect target is not set",
                    namespace=namespace, key=key, variable=value.name,
                )
                return LookupResult.failure()
            self._log.debug(
                "Resolved from environment",
                namespace=namespace, key=key, variable=value.name,
            )
            return LookupResult.success(env_value)
        return LookupResult.success(value)

    def _typed(
        self,
        namespace: str,
        key: str,
        coerce: Callable[[Any], LookupResult[Any]],
        type_name: str,
    ) -> LookupResult[Any]:
        raw = self._lookup(namespace, key)
        if not raw:
            return raw
        result = coerce(raw.value)
        if not result:
            self._log.debug(
                f"Value is not a valid {type_name}",
                namespace=namespace, key=key, value=raw.value,
            )
        return result

    def _unwrap(
        self,
        result: LookupResult[Any],
        namespace: str,
        key: str,
        default: Any,
        expected: str | None = None,
    ) -> Any:
        if result:
            return result.value
        if default is not _UNSET:
            return default
        raise ConfigurationError(namespace, key, expected)


def _or_default(result: LookupResult[Any], default: Any) -> LookupResult[Any]:
    if result or default is _UNSET:
        return result
    return LookupResult.success(default)
