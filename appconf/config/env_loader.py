"""Reads ``.env/<name>.env`` files into environment override dicts.

Each line is ``KEY=VALUE``, optionally prefixed with ``export``. Lines starting
with ``#`` and blank lines are skipped, and a pair of surrounding single or
double quotes is stripped from the value. Inline comments are kept as part of
the value.
"""

from pathlib import Path

# Project root: two levels up from appconf/config/
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

_EXPORT_PREFIX = "export "


def load_env_file(env_name: str = "local", project_root: Path | None = None) -> dict[str, str]:
    """Load .env/<env_name>.env and return as dict. Returns empty dict if file is missing."""
    root = project_root or _PROJECT_ROOT
    env_file = root / ".env" / f"{env_name}.env"
    if not env_file.exists():
        return {}
    return parse_env_lines(env_file.read_text().splitlines())


def parse_env_lines(lines: list[str]) -> dict[str, str]:
    result: dict[str, str] = {}
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith(_EXPORT_PREFIX):
            line = line[len(_EXPORT_PREFIX):].lstrip()
        key, _, value = line.partition("=")
        key = key.strip()
        if not key:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        result[key] = value
    return result
