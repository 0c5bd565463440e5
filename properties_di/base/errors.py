"""Unified property error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``properties_di.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.property_error import PropertyError
from .errors_parts.discovery_io_error import DiscoveryIOError
from .errors_parts.file_read_error import FileReadError
from .errors_parts.missing_required_property_error import MissingRequiredPropertyError
from .errors_parts.property_type_conversion_error import PropertyTypeConversionError

__all__ = [
    "ErrorCode",
    "PropertyError",
    "DiscoveryIOError",
    "FileReadError",
    "MissingRequiredPropertyError",
    "PropertyTypeConversionError",
]
