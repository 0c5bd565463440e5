"""Property store: parse, merge and look up property values."""

from .parser import parse_properties, read_properties
from .resolver import PropertyResolver, load_properties, load_property_file

__all__ = [
    "parse_properties",
    "read_properties",
    "PropertyResolver",
    "load_properties",
    "load_property_file",
]
