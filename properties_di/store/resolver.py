"""Merged, read-only view over every discovered property file.

The resolver is built once at startup and never written afterwards, so it can
be shared between threads without locking. Lookups return ``None`` for absent
keys; whether absence is fatal is the caller's decision.

Keys defined in more than one file resolve to the value of the file merged
last (roots in the order given, files sorted by name within a root). Such
collisions are a deployment concern and are logged as warnings.
"""
from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Union

from ..base.errors import FileReadError
from ..base.logging import LogContext, get_logger, log_event
from ..config.defaults import DEFAULT_ENCODING
from ..discovery.property_file import PropertyFile
from ..discovery.scanner import FileFilter, discover
from .parser import read_properties

FileInput = Union[PropertyFile, str, "os.PathLike[str]"]

logger = get_logger(__name__)


def load_property_file(file: FileInput, encoding: str = DEFAULT_ENCODING) -> Dict[str, str]:
    """Load one file, converting any read or parse failure into :class:`FileReadError`."""
    pf = file if isinstance(file, PropertyFile) else PropertyFile.of(file)
    try:
        entries = read_properties(pf.path, encoding)
    except (OSError, ValueError) as e:
        raise FileReadError(
            message=f"unable to load {pf.path}: {e}",
            path=str(pf.path),
            raw=e,
        ) from e
    log_event(logger, "properties.file_loaded", LogContext(path=str(pf.path)), entries=len(entries))
    return entries


def load_properties(files: Iterable[FileInput], encoding: str = DEFAULT_ENCODING) -> Mapping[str, str]:
    """Merge every file into one read-only mapping.

    Files are applied in iteration order with unconditional overwrite. The
    first file that cannot be loaded aborts the merge; no partial mapping is
    returned.
    """
    merged: Dict[str, str] = {}
    origin: Dict[str, str] = {}
    for file in files:
        pf = file if isinstance(file, PropertyFile) else PropertyFile.of(file)
        for key, value in load_property_file(pf, encoding).items():
            previous = origin.get(key)
            if previous is not None and previous != str(pf.path) and merged[key] != value:
                log_event(
                    logger,
                    "properties.key_overridden",
                    LogContext(path=str(pf.path), key=key),
                    level=logging.WARNING,
                    previous_path=previous,
                )
            merged[key] = value
            origin[key] = str(pf.path)
    return MappingProxyType(merged)


class PropertyResolver:
    """Read-only property lookup shared by every consumer.

    Construct it through :meth:`from_roots` (discover and load) or
    :meth:`from_files`; the plain constructor snapshots an existing mapping.
    """

    def __init__(self, properties: Optional[Mapping[str, str]] = None) -> None:
        self._properties: Mapping[str, str] = MappingProxyType(dict(properties or {}))

    @classmethod
    def from_files(cls, files: Iterable[FileInput], *, encoding: str = DEFAULT_ENCODING) -> "PropertyResolver":
        return cls(load_properties(files, encoding))

    @classmethod
    def from_roots(
        cls,
        roots: Union[None, str, "os.PathLike[str]", Iterable[Union[str, "os.PathLike[str]"]]],
        *,
        encoding: str = DEFAULT_ENCODING,
        file_filter: Optional[FileFilter] = None,
    ) -> "PropertyResolver":
        """Discover property files under ``roots`` and load them.

        Raises
        ------
        DiscoveryIOError
            If a root cannot be listed.
        FileReadError
            If a discovered file cannot be loaded.
        """
        files = discover(roots, file_filter)
        resolver = cls.from_files(files, encoding=encoding)
        log_event(logger, "properties.initialized", files=len(files), keys=len(resolver))
        return resolver

    def get_value(self, key: Optional[str]) -> Optional[str]:
        """Return the value held under ``key`` or ``None`` if it is not defined."""
        if key is None:
            return None
        return self._properties.get(key)

    get = get_value

    def keys(self) -> FrozenSet[str]:
        return frozenset(self._properties)

    def as_mapping(self) -> Mapping[str, str]:
        return self._properties

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"PropertyResolver(keys={len(self._properties)})"


__all__ = ["PropertyResolver", "load_properties", "load_property_file"]
