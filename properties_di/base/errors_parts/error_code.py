"""
Normalized property error codes (taxonomy).

Defines the `ErrorCode` enumeration shared by discovery, loading and typed
lookup failures. Values are lowercase snake_case and are considered a stable
public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    DISCOVERY_IO = "discovery_io"
    FILE_READ = "file_read"
    MISSING_REQUIRED = "missing_required"
    TYPE_CONVERSION = "type_conversion"
    UNSUPPORTED_TYPE = "unsupported_type"


__all__ = ["ErrorCode"]
