"""Typed accessor adaptation between the property store and consumers."""

from .property import Property
from .conversion import convert
from .result import LookupResult, LookupStatus
from .producer import PropertyValueProducer
from .inject import inject_properties, property_requests

__all__ = [
    "Property",
    "convert",
    "LookupResult",
    "LookupStatus",
    "PropertyValueProducer",
    "inject_properties",
    "property_requests",
]
