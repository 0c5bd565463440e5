"""properties_di package

Loads ``.properties`` files found directly under a set of search roots into
one read-only mapping and injects typed values into application objects.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`PropertyError` and its subclasses, :class:`ErrorCode`
    - Discovery: :func:`discover`, :class:`PropertyFileFilter`
    - Store: :class:`PropertyResolver`
    - Injection: :class:`Property`, :class:`PropertyLookupRequest`,
      :class:`PropertyValueProducer`, :func:`inject_properties`
    - Composition root: :func:`build_container`

Example::

    from typing import Annotated
    from properties_di import Property, build_container

    class Mailer:
        host: Annotated[str, Property("mail.host")]
        port: Annotated[int, Property("mail.port")]

    container = build_container({"search_paths": ["/opt/app/conf"]}).start()
    mailer = container.inject(Mailer())
"""

from .base.errors import (
    DiscoveryIOError,
    ErrorCode,
    FileReadError,
    MissingRequiredPropertyError,
    PropertyError,
    PropertyTypeConversionError,
)
from .base.dto import PropertiesSettings, PropertyLookupRequest, TargetType
from .config import get_settings
from .discovery import PropertyFile, PropertyFileFilter, classpath_roots, discover, file_from_url
from .store import PropertyResolver, load_properties, parse_properties
from .injection import (
    LookupResult,
    LookupStatus,
    Property,
    PropertyValueProducer,
    inject_properties,
    property_requests,
)
from .di import PropertiesContainer, build_container

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DiscoveryIOError",
    "ErrorCode",
    "FileReadError",
    "MissingRequiredPropertyError",
    "PropertyError",
    "PropertyTypeConversionError",
    "PropertiesSettings",
    "PropertyLookupRequest",
    "TargetType",
    "get_settings",
    "PropertyFile",
    "PropertyFileFilter",
    "classpath_roots",
    "discover",
    "file_from_url",
    "PropertyResolver",
    "load_properties",
    "parse_properties",
    "LookupResult",
    "LookupStatus",
    "Property",
    "PropertyValueProducer",
    "inject_properties",
    "property_requests",
    "PropertiesContainer",
    "build_container",
]
