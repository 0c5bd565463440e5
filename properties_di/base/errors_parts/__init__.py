"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `properties_di.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .property_error import PropertyError
from .discovery_io_error import DiscoveryIOError
from .file_read_error import FileReadError
from .missing_required_property_error import MissingRequiredPropertyError
from .property_type_conversion_error import PropertyTypeConversionError

__all__ = [
    "ErrorCode",
    "PropertyError",
    "DiscoveryIOError",
    "FileReadError",
    "MissingRequiredPropertyError",
    "PropertyTypeConversionError",
]
