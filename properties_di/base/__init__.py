"""
Properties Base Package

Exports the layer-agnostic contracts shared by discovery, the store and the
injection layer:
- Errors: normalized error codes and the typed exception hierarchy
- DTOs: lookup requests and library settings
- Logging: shared structured logger helpers
"""

from .errors import (
    DiscoveryIOError,
    ErrorCode,
    FileReadError,
    MissingRequiredPropertyError,
    PropertyError,
    PropertyTypeConversionError,
)
from .dto import PropertiesSettings, PropertyLookupRequest, TargetType
from .logging import LogContext, configure_logger, get_logger, log_event

__all__ = [
    "DiscoveryIOError",
    "ErrorCode",
    "FileReadError",
    "MissingRequiredPropertyError",
    "PropertyError",
    "PropertyTypeConversionError",
    "PropertiesSettings",
    "PropertyLookupRequest",
    "TargetType",
    "LogContext",
    "configure_logger",
    "get_logger",
    "log_event",
]
