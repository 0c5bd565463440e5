"""Single-level discovery of property files under a set of root directories.

Each root is listed once; sub-directories are not descended into. A root that
does not exist contributes nothing, while a root that exists but cannot be
listed aborts discovery with :class:`DiscoveryIOError`.

Entries are sorted by name within a root and roots keep the order supplied,
which fixes the merge order downstream. Precedence between files that define
the same key is still a deployment concern, not a guarantee.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from ..base.errors import DiscoveryIOError
from ..base.logging import get_logger, log_event
from .file_filter import PropertyFileFilter
from .property_file import PropertyFile

PathInput = Union[str, "os.PathLike[str]"]
FileFilter = Callable[[str], bool]

logger = get_logger(__name__)


def list_property_files(
    root: Optional[PathInput], file_filter: Optional[FileFilter] = None
) -> List[PropertyFile]:
    """Return the property files directly inside ``root``.

    ``None`` and blank roots contribute nothing.
    """
    if root is None or not os.fspath(root).strip():
        return []
    file_filter = file_filter or PropertyFileFilter()
    root_path = Path(root)
    try:
        with os.scandir(root_path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except (FileNotFoundError, NotADirectoryError):
        return []
    except OSError as e:
        raise DiscoveryIOError(
            message=f"unable to list {root_path}: {e.strerror or e}",
            path=str(root_path),
            raw=e,
        ) from e
    return [PropertyFile.of(entry.path) for entry in entries if file_filter(entry.path)]


def discover(
    root_paths: Union[None, PathInput, Iterable[PathInput]],
    file_filter: Optional[FileFilter] = None,
) -> List[PropertyFile]:
    """Enumerate property files in every root of ``root_paths``.

    Parameters
    ----------
    root_paths:
        One directory or an iterable of directories. ``None`` yields ``[]``
        and blank entries are skipped.
    file_filter:
        Predicate called with the path of each entry; defaults to
        :class:`PropertyFileFilter`.

    Returns
    -------
    List[PropertyFile]
        Qualifying files; a file reachable through two roots appears once.

    Raises
    ------
    DiscoveryIOError
        If an existing root cannot be listed.
    """
    if root_paths is None:
        return []
    if isinstance(root_paths, (str, os.PathLike)):
        root_paths = [root_paths]
    file_filter = file_filter or PropertyFileFilter()

    found: List[PropertyFile] = []
    roots = 0
    for root in root_paths:
        roots += 1
        for pf in list_property_files(root, file_filter):
            if pf not in found:
                found.append(pf)
    log_event(logger, "properties.discover", roots=roots, files=len(found))
    return found


__all__ = ["FileFilter", "discover", "list_property_files"]
