"""Marker declaring that an attribute is filled from the property store.

Usage::

    class MailSettings:
        host: Annotated[str, Property()]
        port: Annotated[int, Property("mail.port")]
        timeout: Annotated[Optional[float], Property(required=False)]

An empty ``value`` means "derive the key": first
``<module>.<ClassName>.<attribute>``, then the bare attribute name.
"""
from __future__ import annotations

from dataclasses import dataclass

from ..base.dto.lookup_request import PropertyLookupRequest, TargetType


@dataclass(frozen=True)
class Property:
    """Property key to be injected.

    Attributes:
        value: Key to search for in the property files; blank to derive it.
        required: Whether a missing value aborts injection.
    """

    value: str = ""
    required: bool = True

    def request_for(
        self, owner: str, member: str, target_type: TargetType = TargetType.STRING
    ) -> PropertyLookupRequest:
        return PropertyLookupRequest(
            key=self.value,
            owner=owner,
            member=member,
            required=self.required,
            target_type=target_type,
        )


__all__ = ["Property"]
