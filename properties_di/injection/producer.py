"""Typed accessors over :class:`PropertyResolver`.

The producer turns a :class:`PropertyLookupRequest` into a typed value. Keys
are tried in the order given by ``PropertyLookupRequest.candidate_keys``:

1. the explicit key, if one is set (and then only that key),
2. otherwise the fully qualified ``<owner>.<member>`` identifier,
3. then the bare member name.

A required request with no value fails with
:class:`MissingRequiredPropertyError`; an optional one yields ``None``.
Numeric targets are parsed only when a value was found.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from ..base.dto.lookup_request import PropertyLookupRequest, TargetType
from ..base.errors import MissingRequiredPropertyError, PropertyTypeConversionError
from ..base.logging import LogContext, get_logger, log_event
from ..store.resolver import PropertyResolver
from .conversion import convert
from .result import LookupResult

logger = get_logger(__name__)


class PropertyValueProducer:
    """Produces typed property values for injection points.

    Stateless apart from the shared resolver, so one instance serves every
    consumer concurrently.
    """

    def __init__(self, resolver: PropertyResolver) -> None:
        self.resolver = resolver

    def _lookup(self, request: PropertyLookupRequest) -> Tuple[Optional[str], Optional[str]]:
        for key in request.candidate_keys():
            value = self.resolver.get_value(key)
            if value is not None:
                if request.explicit_key is None:
                    log_event(
                        logger,
                        "properties.fallback_resolved",
                        LogContext(
                            key=key,
                            target_type=request.target_type.value,
                            extra={"identifier": request.identifier},
                        ),
                        level=logging.DEBUG,
                    )
                return key, value
        return None, None

    def resolve(self, request: PropertyLookupRequest) -> LookupResult:
        """Resolve ``request`` into a tagged :class:`LookupResult` without raising."""
        key, raw = self._lookup(request)
        if raw is None:
            log_event(
                logger,
                "properties.missing",
                LogContext(key=request.identifier, target_type=request.target_type.value),
                level=logging.DEBUG,
                required=request.required,
            )
            if not request.required:
                return LookupResult.missing(request.identifier)
            explicit = request.explicit_key
            detail = f" (key {explicit!r})" if explicit and explicit != request.identifier else ""
            return LookupResult.missing(
                request.identifier,
                MissingRequiredPropertyError(
                    message=f"No value defined for {request.identifier}{detail} but it was marked as required.",
                    key=request.identifier,
                ),
            )
        try:
            value = convert(raw, request.target_type, key)
        except PropertyTypeConversionError as e:
            return LookupResult.type_error(key, e)
        return LookupResult.success(key, value)

    def get_typed_value(self, request: PropertyLookupRequest) -> Any:
        """Return the typed value for ``request``.

        Raises
        ------
        MissingRequiredPropertyError
            If the request is required and no candidate key has a value.
        PropertyTypeConversionError
            If the value does not parse into the requested type.
        """
        return self.resolve(request).unwrap()

    def get_string_value(self, request: PropertyLookupRequest) -> Optional[str]:
        return self.get_typed_value(request.with_target(TargetType.STRING))

    def get_integer_value(self, request: PropertyLookupRequest) -> Optional[int]:
        return self.get_typed_value(request.with_target(TargetType.INTEGER))

    def get_double_value(self, request: PropertyLookupRequest) -> Optional[float]:
        return self.get_typed_value(request.with_target(TargetType.DOUBLE))

    def get(
        self,
        key: Optional[str] = None,
        *,
        fallback_keys: Tuple[str, ...] = (),
        required: bool = True,
        target_type: TargetType = TargetType.STRING,
    ) -> Any:
        """Shortcut building the request from keyword arguments."""
        request = PropertyLookupRequest(
            key=key,
            fallback_keys=tuple(fallback_keys),
            required=required,
            target_type=target_type,
        )
        return self.get_typed_value(request)


__all__ = ["PropertyValueProducer"]
