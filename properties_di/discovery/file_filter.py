"""Predicate selecting property files among directory entries.

A path qualifies when it is not a directory and the text after the last dot
of its name is exactly ``properties``. The path does not need to exist: a
missing path is not a directory, so only its name decides.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from ..config.defaults import PROPERTY_FILE_EXTENSION

PathInput = Union[str, "os.PathLike[str]"]


class PropertyFileFilter:
    """Accepts non-directory paths whose extension is ``properties``."""

    def __init__(self, extension: str = PROPERTY_FILE_EXTENSION) -> None:
        self.extension = extension

    def accept(self, pathname: Optional[PathInput]) -> bool:
        if pathname is None:
            return False
        path = Path(pathname)
        # Sub-directories are never scanned.
        if path.is_dir():
            return False
        return self.get_extension(path.name) == self.extension

    def __call__(self, pathname: Optional[PathInput]) -> bool:
        return self.accept(pathname)

    @staticmethod
    def get_extension(filename: Optional[str]) -> str:
        """Return the text after the last dot of ``filename``.

        ``myFile.with.dots.properties`` gives ``properties``; ``None``, empty
        names and names without a dot give ``""``.
        """
        if not filename:
            return ""
        idx = filename.rfind(".")
        if idx == -1:
            return ""
        return filename[idx + 1:]


def is_property_file(pathname: Optional[PathInput]) -> bool:
    return PropertyFileFilter().accept(pathname)


__all__ = ["PropertyFileFilter", "is_property_file"]
