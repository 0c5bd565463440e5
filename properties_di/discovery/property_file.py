"""Value object for a discovered property file."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class PropertyFile:
    """Absolute path of a file holding ``key=value`` text."""

    path: Path

    @classmethod
    def of(cls, path: Union[str, "os.PathLike[str]"]) -> "PropertyFile":
        return cls(Path(path).absolute())

    @property
    def name(self) -> str:
        return self.path.name

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.path)


__all__ = ["PropertyFile"]
