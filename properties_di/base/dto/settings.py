"""Validated library settings.

Purpose
-------
Carry the merged configuration (see ``properties_di.config.get_settings``)
into the composition root as one typed object.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and `.model_dump()` convenience.

Notes
-----
- ``search_paths`` accepts a list or a single ``os.pathsep`` separated string.
- An empty ``search_paths`` means "scan the interpreter's import roots".
"""
from __future__ import annotations

import codecs
import os
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from ...config.defaults import DEFAULT_ENCODING, DEFAULT_JSON_LOGS


class PropertiesSettings(BaseModel):
    """Settings for discovery, loading and logging.

    Attributes
    ----------
    search_paths:
        Root directories scanned (non-recursively) for property files.
    encoding:
        Text encoding used to read property files.
    log_level:
        Level name applied to the shared logger; ``None`` keeps the current one.
    log_file:
        Optional path of a rotating log file.
    json_logs:
        Emit JSON lines (``True``) or plain text.
    """

    search_paths: List[str] = Field(default_factory=list)
    encoding: str = DEFAULT_ENCODING
    log_level: Optional[str] = None
    log_file: Optional[str] = None
    json_logs: bool = DEFAULT_JSON_LOGS

    @field_validator("search_paths", mode="before")
    @classmethod
    def _split_search_paths(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [p for p in value.split(os.pathsep) if p.strip()]
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value


__all__ = ["PropertiesSettings"]
