"""Search roots supplied by the host runtime.

Python has no class loader resource roots; the closest equivalent is the
interpreter's import path. ``classpath_roots`` turns ``sys.path`` into the
list of existing directories, and ``file_from_url`` converts ``file:`` URLs
handed over by a host into filesystem paths.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, List, Optional
from urllib.parse import urlsplit
from urllib.request import url2pathname


def file_from_url(url: str) -> Path:
    """Convert a ``file:`` URL into a path.

    Percent escapes are decoded (``file:///a%20b`` -> ``/a b``) and literal
    whitespace inside the URL is kept as is.

    Raises
    ------
    ValueError
        If the URL uses a scheme other than ``file``.
    """
    parts = urlsplit(url)
    if parts.scheme and parts.scheme != "file":
        raise ValueError(f"not a file URL: {url}")
    path = url2pathname(parts.path)
    if parts.netloc and parts.netloc != "localhost":
        # UNC style host component
        path = f"//{parts.netloc}{path}"
    return Path(path)


def classpath_roots(entries: Optional[Iterable[str]] = None) -> List[Path]:
    """Return existing directories of the import path, in order, without duplicates.

    An empty entry stands for the current working directory. Zip archives and
    missing entries are skipped.
    """
    if entries is None:
        entries = sys.path
    roots: List[Path] = []
    for entry in entries:
        candidate = Path(entry) if entry else Path.cwd()
        if not candidate.is_dir():
            continue
        resolved = candidate.resolve()
        if resolved not in roots:
            roots.append(resolved)
    return roots


__all__ = ["file_from_url", "classpath_roots"]
