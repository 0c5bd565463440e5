"""Raised when a discovered property file cannot be opened, decoded or parsed."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .property_error import PropertyError


@dataclass
class FileReadError(PropertyError):
    """A property file failed to load; initialization produces no mapping."""

    code: ErrorCode = ErrorCode.FILE_READ
    message: str = "unable to read property file"


__all__ = ["FileReadError"]
