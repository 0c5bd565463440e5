"""Raised when a search root exists but cannot be listed."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .property_error import PropertyError


@dataclass
class DiscoveryIOError(PropertyError):
    """Enumeration of a search root failed (for example permission denied)."""

    code: ErrorCode = ErrorCode.DISCOVERY_IO
    message: str = "unable to list search root"


__all__ = ["DiscoveryIOError"]
