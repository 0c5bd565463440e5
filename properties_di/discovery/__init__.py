"""File discovery: locate ``.properties`` files directly under search roots."""

from .property_file import PropertyFile
from .file_filter import PropertyFileFilter, is_property_file
from .classpath import classpath_roots, file_from_url
from .scanner import discover, list_property_files

__all__ = [
    "PropertyFile",
    "PropertyFileFilter",
    "is_property_file",
    "classpath_roots",
    "file_from_url",
    "discover",
    "list_property_files",
]
