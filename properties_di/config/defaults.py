"""Centralized defaults for discovery, loading and configuration.

Kept free of imports from the rest of the package so every layer can depend
on it.
"""
from __future__ import annotations

# Extension (text after the last dot) that marks a property file.
PROPERTY_FILE_EXTENSION = "properties"

# Historical encoding of the properties text format.
DEFAULT_ENCODING = "iso-8859-1"

DEFAULT_JSON_LOGS = True

# Environment variables read by ``properties_di.config``.
CONFIG_FILE_ENV = "PROPERTIES_DI_CONFIG_FILE"
SEARCH_PATH_ENV = "PROPERTIES_DI_SEARCH_PATH"
ENCODING_ENV = "PROPERTIES_DI_ENCODING"
LOG_LEVEL_ENV = "PROPERTIES_DI_LOG_LEVEL"
LOG_FILE_ENV = "PROPERTIES_DI_LOG_FILE"
JSON_LOGS_ENV = "PROPERTIES_DI_JSON_LOGS"

__all__ = [
    "PROPERTY_FILE_EXTENSION",
    "DEFAULT_ENCODING",
    "DEFAULT_JSON_LOGS",
    "CONFIG_FILE_ENV",
    "SEARCH_PATH_ENV",
    "ENCODING_ENV",
    "LOG_LEVEL_ENV",
    "LOG_FILE_ENV",
    "JSON_LOGS_ENV",
]
