"""Fill ``Annotated[..., Property(...)]`` attributes of an object.

``property_requests`` builds one :class:`PropertyLookupRequest` per marked
attribute; ``inject_properties`` resolves all of them before assigning any,
so a missing required value or a bad number leaves the target untouched.
"""
from __future__ import annotations

import inspect
import logging
from types import UnionType
from typing import Annotated, Any, Dict, Optional, Tuple, TypeVar, Union, get_args, get_origin, get_type_hints

from ..base.dto.lookup_request import PropertyLookupRequest, TargetType
from ..base.errors import ErrorCode, PropertyError
from ..base.logging import get_logger, log_event
from .producer import PropertyValueProducer
from .property import Property

_UNION_ORIGINS = (Union, UnionType)

T = TypeVar("T")

logger = get_logger(__name__)

_TARGET_TYPES: Dict[Any, TargetType] = {
    str: TargetType.STRING,
    int: TargetType.INTEGER,
    float: TargetType.DOUBLE,
}


def _target_type_for(annotation: Any) -> Optional[TargetType]:
    if get_origin(annotation) in _UNION_ORIGINS:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) != 1:
            return None
        annotation = args[0]
    return _TARGET_TYPES.get(annotation)


def _declaring_class(cls: type, name: str) -> type:
    for klass in cls.__mro__:
        if name in inspect.get_annotations(klass):
            return klass
    return cls


def _split_marker(hint: Any) -> Tuple[Any, Optional[Property]]:
    """Return the annotated base type and its ``Property`` marker, if any.

    ``Optional[Annotated[T, Property()]]`` is read as
    ``Annotated[Optional[T], Property()]``.
    """
    if get_origin(hint) in _UNION_ORIGINS:
        args = get_args(hint)
        inner = [a for a in args if a is not type(None)]
        if len(inner) == 1 and len(args) == 2 and get_origin(inner[0]) is Annotated:
            base, marker = _split_marker(inner[0])
            return Optional[base], marker
        return hint, None
    if get_origin(hint) is not Annotated:
        return hint, None
    base, *extras = get_args(hint)
    return base, next((e for e in extras if isinstance(e, Property)), None)


def property_requests(cls: type) -> Dict[str, PropertyLookupRequest]:
    """Return the lookup request of every ``Property``-marked attribute of ``cls``.

    The owner of each request is the ``module.qualname`` of the class that
    declares the attribute.

    Raises
    ------
    PropertyError
        With code ``UNSUPPORTED_TYPE`` when a marked attribute is not ``str``,
        ``int`` or ``float`` (optionally wrapped in ``Optional``).
    """
    requests: Dict[str, PropertyLookupRequest] = {}
    for name, hint in get_type_hints(cls, include_extras=True).items():
        base, marker = _split_marker(hint)
        if marker is None:
            continue
        declaring = _declaring_class(cls, name)
        owner = f"{declaring.__module__}.{declaring.__qualname__}"
        target = _target_type_for(base)
        if target is None:
            raise PropertyError(
                code=ErrorCode.UNSUPPORTED_TYPE,
                message=f"cannot inject {base!r}; supported types are str, int and float",
                key=f"{owner}.{name}",
            )
        requests[name] = marker.request_for(owner, name, target)
    return requests


def inject_properties(target: T, producer: PropertyValueProducer) -> T:
    """Assign every ``Property``-marked attribute of ``target`` and return it.

    Raises
    ------
    MissingRequiredPropertyError, PropertyTypeConversionError
        From the first attribute that cannot be resolved; nothing is assigned.
    """
    requests = property_requests(type(target))
    values = {name: producer.get_typed_value(request) for name, request in requests.items()}
    for name, value in values.items():
        setattr(target, name, value)
    log_event(
        logger,
        "properties.injected",
        level=logging.DEBUG,
        owner=type(target).__qualname__,
        fields=len(values),
    )
    return target


__all__ = ["property_requests", "inject_properties"]
