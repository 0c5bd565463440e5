"""Raised when a present value cannot be parsed into the requested type."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .property_error import PropertyError


@dataclass
class PropertyTypeConversionError(PropertyError):
    """A raw property string failed numeric parsing.

    Attributes:
        raw_value: The string found in the property mapping.
        target_type: Name of the requested type (``"integer"``, ``"double"``).
    """

    code: ErrorCode = ErrorCode.TYPE_CONVERSION
    message: str = "value cannot be converted"
    raw_value: Optional[str] = None
    target_type: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return (
            f"{self.code.value} [{self.key or '-'}]: cannot convert "
            f"{self.raw_value!r} to {self.target_type or '?'}"
        )


__all__ = ["PropertyTypeConversionError"]
