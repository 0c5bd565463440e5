"""Typed lookup request passed from the injection layer to the producer.

Purpose
-------
Replace reflective call-site inspection with an explicit request object: the
caller states the key (or the owner/member pair used to derive fallback keys),
whether the value is required, and the type it expects back.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and immutability.

Failure modes & side effects
----------------------------
- Pure data container. A request naming neither a key, a member nor any
  fallback key is rejected with a pydantic ``ValidationError``.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator


class TargetType(str, Enum):
    """Value types the producer can hand back."""

    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"


class PropertyLookupRequest(BaseModel):
    """One typed lookup, built per injection point at resolution time.

    Attributes
    ----------
    key:
        Explicit property key. When non-blank after trimming it is the only
        key looked up.
    owner:
        Fully qualified name of the type declaring the consumer, used to build
        the ``<owner>.<member>`` fallback identifier.
    member:
        Attribute name of the consumer; also the last fallback key.
    fallback_keys:
        Explicit ordered fallback keys; replaces the owner/member derivation.
    required:
        Whether absence must fail the consumer.
    target_type:
        Requested value type.
    """

    model_config = ConfigDict(frozen=True)

    key: Optional[str] = None
    owner: Optional[str] = None
    member: Optional[str] = None
    fallback_keys: Tuple[str, ...] = ()
    required: bool = True
    target_type: TargetType = TargetType.STRING

    @model_validator(mode="after")
    def _require_some_identifier(self) -> "PropertyLookupRequest":
        if self.explicit_key is None and not self.member and not self.fallback_keys:
            raise ValueError("lookup request needs a key, a member name or fallback keys")
        return self

    @property
    def explicit_key(self) -> Optional[str]:
        if self.key is None or not self.key.strip():
            return None
        return self.key

    @property
    def fallback_identifier(self) -> Optional[str]:
        """Fully qualified identifier reported when a required value is missing."""
        if self.owner and self.member:
            return f"{self.owner}.{self.member}"
        if self.fallback_keys:
            return self.fallback_keys[0]
        return self.member or None

    @property
    def identifier(self) -> str:
        return self.fallback_identifier or self.explicit_key or "-"

    def candidate_keys(self) -> Tuple[str, ...]:
        """Keys to try in order; the first one with a value wins."""
        explicit = self.explicit_key
        if explicit is not None:
            return (explicit,)
        if self.fallback_keys:
            keys = list(self.fallback_keys)
        else:
            keys = [self.fallback_identifier, self.member]
        seen: list[str] = []
        for k in keys:
            if k and k not in seen:
                seen.append(k)
        return tuple(seen)

    def with_target(self, target_type: TargetType) -> "PropertyLookupRequest":
        return self.model_copy(update={"target_type": target_type})


__all__ = ["TargetType", "PropertyLookupRequest"]
