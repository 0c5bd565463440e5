"""String to typed value conversion for property lookups."""
from __future__ import annotations

import re
from typing import Any, Callable, Dict, Optional

from ..base.dto.lookup_request import TargetType
from ..base.errors import PropertyTypeConversionError

_INTEGER = re.compile(r"[+-]?[0-9]+")


def to_integer(raw: str) -> int:
    """Parse an optionally signed run of decimal digits; nothing else is accepted."""
    if not _INTEGER.fullmatch(raw):
        raise ValueError(f"invalid literal for integer: {raw!r}")
    return int(raw)


def to_double(raw: str) -> float:
    # float() also takes digit separators, which are not part of the format.
    if "_" in raw:
        raise ValueError(f"invalid literal for double: {raw!r}")
    return float(raw)


_CONVERTERS: Dict[TargetType, Callable[[str], Any]] = {
    TargetType.STRING: str,
    TargetType.INTEGER: to_integer,
    TargetType.DOUBLE: to_double,
}


def convert(raw: Optional[str], target_type: TargetType, key: Optional[str] = None) -> Any:
    """Convert ``raw`` to ``target_type``; ``None`` passes through unparsed.

    Raises
    ------
    PropertyTypeConversionError
        If ``raw`` is not a valid literal for the target type.
    """
    if raw is None:
        return None
    try:
        return _CONVERTERS[target_type](raw)
    except ValueError as e:
        raise PropertyTypeConversionError(
            message=str(e),
            key=key,
            raw_value=raw,
            target_type=target_type.value,
            raw=e,
        ) from e


__all__ = ["convert", "to_integer", "to_double"]
