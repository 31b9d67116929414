from __future__ import annotations

import json
import sys
from typing import Any

from appconf.config.env_loader import load_env_file
from appconf.config.store_loader import load_config_file
from appconf.lookup.errors import ConfigurationError
from appconf.lookup.resolver import Resolver, coerce_boolean, coerce_integer
from appconf.lookup.values import LookupResult
from appconf.services.environment.os_environment import OsEnvironment
from appconf.services.logger.factory import LoggerFactory
from appconf.services.logger.interface import LoggingInterface
from appconf.services.store.memory_store import MemoryConfigStore

USAGE = "Usage: python -m appconf get <namespace> <key> [flags]"

# Flags that take a value. Maps flag name -> default.
_VALUE_FLAGS: dict[str, str | None] = {
    "type": "raw",
    "default": None,
    "config": None,
    "env": None,
    "env-file": None,
    "log": None,
}
# Flags that stand alone.
_SWITCHES = {"strict"}

_TYPES = ("raw", "integer", "boolean")


def _parse_env_overrides(raw: str) -> dict[str, str]:
    """Parse a JSON string into env overrides. Validates types."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"--env value is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("--env value must be a JSON object")
    for k, v in data.items():
        if not isinstance(k, str) or not isinstance(v, str):
            raise ValueError("--env JSON must have string keys and string values")
    return data


def _extract_flags(remaining: list[str]) -> tuple[dict[str, Any], list[str]]:
    """Split flags from positional args.

    Returns (flags, positionals). Value flags missing their value are an error.
    """
    flags: dict[str, Any] = dict(_VALUE_FLAGS)
    flags["strict"] = False
    positionals: list[str] = []

    i = 0
    while i < len(remaining):
        arg = remaining[i]
        if arg.startswith("--"):
            name = arg[2:]
            if name in _SWITCHES:
                flags[name] = True
                i += 1
            elif name in _VALUE_FLAGS:
                if i + 1 >= len(remaining):
                    raise ValueError(f"Missing value for --{name}")
                flags[name] = remaining[i + 1]
                i += 2
            else:
                raise ValueError(f"Unknown flag: --{name}")
        else:
            positionals.append(arg)
            i += 1

    if flags["type"] not in _TYPES:
        raise ValueError(
            f"Invalid value for --type: '{flags['type']}' (choices: {', '.join(_TYPES)})"
        )
    return flags, positionals


def _build_env_overrides(flags: dict[str, Any]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    if flags["env-file"]:
        overrides.update(load_env_file(flags["env-file"]))
    # --env wins over the file
    if flags["env"]:
        overrides.update(_parse_env_overrides(flags["env"]))
    return overrides


def _cast_default(raw: str, type_name: str) -> Any:
    match type_name:
        case "integer":
            result = coerce_integer(raw)
        case "boolean":
            result = coerce_boolean(raw)
        case _:
            return raw
    if not result:
        raise ValueError(f"Invalid --default for type {type_name}: '{raw}'")
    return result.value


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return json.dumps(value)


def build_resolver(
    flags: dict[str, Any], env_overrides: dict[str, str]
) -> tuple[Resolver, LoggingInterface]:
    log_impl = flags["log"] or env_overrides.get("LOG_IMPL", "pretty")
    logger = LoggerFactory(default_impl=log_impl).create()

    store = load_config_file(flags["config"]) if flags["config"] else MemoryConfigStore()
    resolver = Resolver(store, OsEnvironment(overrides=env_overrides), logger)
    return resolver, logger


def run_lookup(argv: list[str]) -> tuple[int, LookupResult[Any]]:
    """Testable entry point: resolves one key and prints it. Returns (exit_code, result).

    Raises ConfigurationError when --strict is set and the key cannot be resolved.
    """
    if not argv or argv[0] != "get":
        raise ValueError(USAGE)

    flags, positionals = _extract_flags(argv[1:])
    if len(positionals) != 2:
        raise ValueError(USAGE)
    namespace, key = positionals

    env_overrides = _build_env_overrides(flags)
    resolver, _ = build_resolver(flags, env_overrides)

    type_name = flags["type"]
    lookup, require = {
        "raw": (resolver.get, resolver.require),
        "integer": (resolver.get_integer, resolver.require_integer),
        "boolean": (resolver.get_boolean, resolver.require_boolean),
    }[type_name]

    extra: list[Any] = []
    if flags["default"] is not None:
        extra.append(_cast_default(flags["default"], type_name))

    if flags["strict"]:
        result = LookupResult.success(require(namespace, key, *extra))
    else:
        result = lookup(namespace, key, *extra)

    if not result:
        return (1, result)
    print(format_value(result.value))
    return (0, result)


def run_cli(argv: list[str] | None = None) -> None:
    args = argv if argv is not None else sys.argv[1:]
    try:
        exit_code, _ = run_lookup(args)
        sys.exit(exit_code)
    except (ValueError, FileNotFoundError, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
