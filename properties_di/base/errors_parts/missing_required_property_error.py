"""Raised when a required property resolves to no value."""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .property_error import PropertyError


@dataclass
class MissingRequiredPropertyError(PropertyError):
    """No value was found for a property marked as required.

    ``key`` holds the fully qualified fallback identifier of the consumer
    (``<owner>.<member>``) when one is known, otherwise the explicit key.
    """

    code: ErrorCode = ErrorCode.MISSING_REQUIRED
    message: str = "no value defined for required property"


__all__ = ["MissingRequiredPropertyError"]
