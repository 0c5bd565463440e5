"""properties_di.config.env
=========================

Environment variable mapping for library settings.

Purpose
-------
- Single source of truth mapping settings fields to the environment variables
  that override them.
- These variables configure discovery, decoding and logging only. They never
  overlay the values of properties read from files.

Failure Modes
-------------
- Unset or blank variables are skipped; nothing here raises.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from .defaults import (
    ENCODING_ENV,
    JSON_LOGS_ENV,
    LOG_FILE_ENV,
    LOG_LEVEL_ENV,
    SEARCH_PATH_ENV,
)

# Settings field -> environment variable
ENV_MAP: Dict[str, str] = {
    "search_paths": SEARCH_PATH_ENV,
    "encoding": ENCODING_ENV,
    "log_level": LOG_LEVEL_ENV,
    "log_file": LOG_FILE_ENV,
    "json_logs": JSON_LOGS_ENV,
}

_TRUTHY = {"1", "t", "true", "y", "yes", "on"}
_FALSY = {"0", "f", "false", "n", "no", "off"}


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Map common truthy/falsey strings to bool; ``None`` when unrecognized."""
    if value is None:
        return None
    val = value.strip().lower()
    if val in _TRUTHY:
        return True
    return False if val in _FALSY else None


def env_overrides() -> Dict[str, Any]:
    """Return settings fields set through the environment.

    ``search_paths`` is split on ``os.pathsep``; ``json_logs`` accepts the
    usual boolean spellings and is ignored when unrecognized.
    """
    out: Dict[str, Any] = {}
    for field, name in ENV_MAP.items():
        raw = os.environ.get(name)
        if raw is None or not raw.strip():
            continue
        if field == "search_paths":
            out[field] = [p for p in raw.split(os.pathsep) if p.strip()]
        elif field == "json_logs":
            flag = parse_bool(raw)
            if flag is not None:
                out[field] = flag
        else:
            out[field] = raw.strip()
    return out


__all__ = ["ENV_MAP", "parse_bool", "env_overrides"]
