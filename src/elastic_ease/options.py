"""Persistent defaults for the command line tools."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .easing import EASING_FUNCTIONS

logger = logging.getLogger(__name__)

USER_DIR = Path.home() / ".elastic_ease"
OPTIONS_FILE = USER_DIR / "options.json"

DEFAULT_OPTIONS: Dict[str, Any] = {
    "begin": 0.0,
    "change": 1.0,
    "duration": 1.0,
    "steps": 20,
    "curve": "ease-in-out-elastic",
}

_CONVERTERS = {
    "begin": float,
    "change": float,
    "duration": float,
    "steps": int,
    "curve": str,
}


def _coerce(key: str, value: Any) -> Any:
    if isinstance(value, bool):
        raise TypeError(f"expected a number for '{key}'")
    if key == "steps" and isinstance(value, float) and not value.is_integer():
        raise ValueError(f"steps must be a whole number, got {value}")
    result = _CONVERTERS[key](value)
    if key == "steps" and result < 1:
        raise ValueError("steps must be at least 1")
    if key == "curve" and result not in EASING_FUNCTIONS:
        raise KeyError(f"Unknown easing '{result}'")
    return result


def load_options(path: str | Path = OPTIONS_FILE) -> Dict[str, Any]:
    """Return the defaults updated with the values stored in ``path``.

    Missing or unreadable files fall back to :data:`DEFAULT_OPTIONS`.
    """
    options = dict(DEFAULT_OPTIONS)
    path = Path(path)
    if not path.exists():
        return options
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load options: %s", exc)
        return options
    if not isinstance(data, dict):
        logger.warning("Ignoring options file %s: expected an object", path)
        return options

    for key in DEFAULT_OPTIONS:
        if key not in data:
            continue
        try:
            options[key] = _coerce(key, data[key])
        except (TypeError, ValueError, KeyError) as exc:
            logger.warning("Invalid option %s=%r: %s", key, data[key], exc)
    return options


def save_options(data: Dict[str, Any], path: str | Path = OPTIONS_FILE) -> bool:
    """Write the recognised keys of ``data`` to ``path``."""
    path = Path(path)
    payload = {k: data[k] for k in DEFAULT_OPTIONS if k in data}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
    except OSError as exc:
        logger.warning("Failed to save options: %s", exc)
        return False
    return True


__all__ = [
    "USER_DIR",
    "OPTIONS_FILE",
    "DEFAULT_OPTIONS",
    "load_options",
    "save_options",
]
