"""Tagged outcome of a typed lookup.

``PropertyValueProducer.resolve`` never raises for lookup outcomes; it returns
one of four variants callers can branch on:

* ``OK``: a value was found (and converted),
* ``MISSING``: no candidate key had a value; ``error`` is set only when the
  request was required,
* ``TYPE_ERROR``: a value was found but did not parse,
* ``IO_ERROR``: the store itself could not be initialized.

``unwrap()`` turns the result back into the raising style.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..base.errors import PropertyError


class LookupStatus(str, Enum):
    OK = "ok"
    MISSING = "missing"
    TYPE_ERROR = "type_error"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one lookup.

    Attributes:
        status: Variant tag.
        key: Key that produced the value, or the consumer identifier when missing.
        value: Converted value (``None`` unless ``status`` is ``OK``).
        error: Typed error to raise on ``unwrap``, if any.
    """

    status: LookupStatus
    key: Optional[str] = None
    value: Any = None
    error: Optional[PropertyError] = None

    @classmethod
    def success(cls, key: str, value: Any) -> "LookupResult":
        return cls(LookupStatus.OK, key=key, value=value)

    @classmethod
    def missing(cls, identifier: Optional[str], error: Optional[PropertyError] = None) -> "LookupResult":
        return cls(LookupStatus.MISSING, key=identifier, error=error)

    @classmethod
    def type_error(cls, key: Optional[str], error: PropertyError) -> "LookupResult":
        return cls(LookupStatus.TYPE_ERROR, key=key, error=error)

    @classmethod
    def io_error(cls, error: PropertyError) -> "LookupResult":
        return cls(LookupStatus.IO_ERROR, key=error.key, error=error)

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.OK

    def unwrap(self) -> Any:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: Any) -> Any:
        return self.value if self.found else default


__all__ = ["LookupStatus", "LookupResult"]
