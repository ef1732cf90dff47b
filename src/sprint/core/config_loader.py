"""Reading sprint.json / sprint.jsonc files and combining them."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict

import commentjson

from ..util.log import Log

log = Log.create({"service": "config.loader"})

_ENV_REF = re.compile(r"\{env:([^}]+)\}")


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a new dict with ``override`` layered over ``base``.

    Nested objects merge key by key; any other value in ``override``
    replaces the one in ``base``.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = deep_merge(current, value)
        merged[key] = value
    return merged


def substitute_env_vars(text: str) -> str:
    """Expand ``{env:NAME}`` references; unset variables become empty."""
    return _ENV_REF.sub(lambda match: os.environ.get(match.group(1), ""), text)


def load_json_file(filepath: str) -> Dict[str, Any]:
    """Parse a JSON or JSONC config file.

    Missing, unreadable, malformed and non-object files all yield ``{}`` so a
    broken file never blocks startup; the reason is logged.
    """
    path = Path(filepath)
    if not path.is_file():
        return {}

    try:
        data = commentjson.loads(substitute_env_vars(path.read_text(encoding="utf-8")))
    except (OSError, ValueError, UnicodeDecodeError) as e:
        log.error("failed to load config file", {"path": filepath, "error": str(e)})
        return {}

    if isinstance(data, dict):
        return data
    log.error("config file is not an object", {"path": filepath, "type": type(data).__name__})
    return {}
