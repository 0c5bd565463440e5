"""DTO validation package for properties."""

from .lookup_request import TargetType, PropertyLookupRequest
from .settings import PropertiesSettings

__all__ = [
    "TargetType",
    "PropertyLookupRequest",
    "PropertiesSettings",
]
