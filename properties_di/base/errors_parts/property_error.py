"""
Structured property error exception type.

Base class of the error taxonomy. Wraps the underlying failure with a
normalized `ErrorCode` so callers and log lines can branch on the category
instead of the message text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class PropertyError(Exception):
    """Represents a structured property error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        key: Property key (or fallback identifier) involved, if any.
        path: Filesystem path involved, if any.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    key: Optional[str] = None
    path: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining code, subject and message."""
        subject = self.key or self.path or "-"
        return f"{self.code.value} [{subject}]: {self.message}"


__all__ = ["PropertyError"]
