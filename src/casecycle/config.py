"""
TOML config file support for casecycle.

Settings come from the first of `.casecycle.toml`, `casecycle.toml`, or a
`pyproject.toml` with a `[tool.casecycle]` table, looking in the starting directory
and then each parent in turn. Keys may sit at the top level or under a `[cycle]`
table:

    case-cycle = ["original", "const", "camel", "snake", "kebab"]
    lines = false

`case-cycle` may also be a comma-separated string. Values of the wrong type are
dropped with a warning, as are unknown keys, so a bad entry never stops a run.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

log = logging.getLogger(__name__)

_STANDALONE_NAMES = (".casecycle.toml", "casecycle.toml")
_PYPROJECT = "pyproject.toml"
_SECTION = "cycle"


@dataclass
class CaseCycleConfig:
    """
    Settings read from a config file. A field is `None` when the file doesn't set
    it, so callers can tell "not configured" from a configured default.
    """

    case_cycle: list[str] | None = None
    lines: bool | None = None


def find_config_file(start_dir: Path) -> Path | None:
    """
    Return the nearest config file at or above `start_dir`, or `None`.
    A `pyproject.toml` only counts if it has a readable `[tool.casecycle]` table.
    """
    start = start_dir.resolve()
    for directory in (start, *start.parents):
        for name in _STANDALONE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        pyproject = directory / _PYPROJECT
        if pyproject.is_file() and _casecycle_table(pyproject) is not None:
            return pyproject
    return None


def _casecycle_table(pyproject: Path) -> dict[str, Any] | None:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, OSError):
        return None
    table = data.get("tool", {}).get("casecycle")
    return cast(dict[str, Any], table) if isinstance(table, dict) else None


def load_config(config_path: Path) -> CaseCycleConfig:
    """
    Read settings from `config_path`. Raises `tomllib.TOMLDecodeError` or `OSError`
    if the file can't be read or parsed.
    """
    data: dict[str, Any] = tomllib.loads(config_path.read_text(encoding="utf-8"))
    if config_path.name == _PYPROJECT:
        data = cast(dict[str, Any], data.get("tool", {}).get("casecycle", {}))

    settings = dict(data)
    section = settings.pop(_SECTION, None)
    if isinstance(section, dict):
        settings.update(cast(dict[str, Any], section))
    elif section is not None:
        log.warning("Ignoring config key %r: expected a table", _SECTION)

    config = CaseCycleConfig()
    for key, value in settings.items():
        if key in ("case-cycle", "case_cycle"):
            config.case_cycle = _read_case_cycle(value)
        elif key == "lines":
            config.lines = _read_bool(key, value)
        else:
            log.warning("Ignoring unrecognized config key: %r", key)
    return config


def _read_case_cycle(value: Any) -> list[str] | None:
    if isinstance(value, str):
        return [name.strip() for name in value.split(",") if name.strip()]
    if not isinstance(value, list):
        log.warning("Ignoring case-cycle: expected a list of style names, got %r", value)
        return None

    names: list[str] = []
    for item in cast(list[Any], value):
        if isinstance(item, str):
            names.append(item)
        else:
            log.warning("Ignoring non-string entry in case-cycle: %r", item)
    return names


def _read_bool(key: str, value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    log.warning("Ignoring config key %r: expected true or false, got %r", key, value)
    return None
