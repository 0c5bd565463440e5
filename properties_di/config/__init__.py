"""Unified configuration layer for the properties library.

Goals
-----
* Centralize defaults (encoding, logging).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``PROPERTIES_DI_CONFIG_FILE``
    3. Environment variables (``PROPERTIES_DI_SEARCH_PATH``, ...)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_settings(overrides)``.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML. Structure example:

```
search_paths:
  - /opt/app/conf
  - /etc/app
encoding: utf-8
log_level: DEBUG
```

Public API
----------
* get_settings(overrides: dict | None = None) -> PropertiesSettings
* load_config_file(path) -> dict
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

import yaml

from .defaults import CONFIG_FILE_ENV
from .env import env_overrides

if TYPE_CHECKING:
    from ..base.dto.settings import PropertiesSettings


def load_config_file(path: str | os.PathLike[str] | None) -> Dict[str, Any]:
    """Load a JSON or YAML mapping from ``path``.

    A missing path (unset or non-existent file) yields ``{}``. A file that is
    neither valid JSON nor valid YAML, or whose top level is not a mapping,
    raises ``ValueError``.
    """
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"config file {p} is neither JSON nor YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {p} must contain a mapping at the top level")
    return data


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> "PropertiesSettings":
    """Return merged, validated settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    # Local import: base.dto.settings depends on config.defaults.
    from ..base.dto.settings import PropertiesSettings

    cfg: Dict[str, Any] = {}
    cfg |= load_config_file(os.getenv(CONFIG_FILE_ENV))
    cfg |= env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return PropertiesSettings(**cfg)


__all__ = ["get_settings", "load_config_file"]
