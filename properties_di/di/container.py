"""Minimal dependency injection container for the property store.

Goals:
- Centralize construction of the shared resolver and producer.
- Make the store an explicitly owned object passed to consumers instead of
  ambient global state.
- Initialize once, at startup, and stay read-only afterwards.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TypeVar

from ..base.dto.lookup_request import PropertyLookupRequest
from ..base.dto.settings import PropertiesSettings
from ..base.errors import DiscoveryIOError, FileReadError
from ..base.logging import configure_logger, get_logger, log_event
from ..config import get_settings
from ..discovery.classpath import classpath_roots
from ..injection.inject import inject_properties
from ..injection.producer import PropertyValueProducer
from ..injection.result import LookupResult
from ..store.resolver import PropertyResolver

T = TypeVar("T")

logger = get_logger(__name__)


class PropertiesContainer:
    """Dependency injection container for the property store and its producer.

    The resolver is created on first use (or by :meth:`start`) and cached for
    the lifetime of the container. Start the container before sharing it
    between threads; afterwards every accessor is read-only.
    """

    def __init__(self, settings: PropertiesSettings | None = None) -> None:
        """Initialize the container and apply the logging settings.

        Args:
            settings: Validated settings; defaults to ``get_settings()``.
        """
        self.settings = settings or get_settings()
        self._singletons: Dict[str, Any] = {}
        configure_logger(
            level=self.settings.log_level,
            file_path=self.settings.log_file,
            json_mode=self.settings.json_logs,
            # Without a configured log file, leave handlers set up by the host alone.
            keep_file_handler=self.settings.log_file is None,
        )

    def search_roots(self) -> List[str]:
        """Return the configured search roots, or the import path roots when none are set."""
        if self.settings.search_paths:
            return list(self.settings.search_paths)
        return [str(p) for p in classpath_roots()]

    # ---- Shared singletons ----
    def resolver(self) -> PropertyResolver:
        """Return the shared resolver, discovering and loading files on first call.

        Raises:
            DiscoveryIOError: If a search root cannot be listed.
            FileReadError: If a discovered file cannot be loaded.
        """
        if "resolver" not in self._singletons:
            roots = self.search_roots()
            log_event(logger, "properties.container_start", roots=roots)
            self._singletons["resolver"] = PropertyResolver.from_roots(roots, encoding=self.settings.encoding)
        return self._singletons["resolver"]

    def producer(self) -> PropertyValueProducer:
        """Return the shared producer bound to :meth:`resolver`."""
        if "producer" not in self._singletons:
            self._singletons["producer"] = PropertyValueProducer(self.resolver())
        return self._singletons["producer"]

    def start(self) -> "PropertiesContainer":
        """Eagerly initialize the store so configuration errors surface at startup."""
        self.producer()
        return self

    # ---- Consumer helpers ----
    def get_value(self, key: str) -> Optional[str]:
        return self.resolver().get_value(key)

    def inject(self, target: T) -> T:
        """Fill the ``Property``-marked attributes of ``target``."""
        return inject_properties(target, self.producer())

    def lookup(self, request: PropertyLookupRequest) -> LookupResult:
        """Resolve ``request`` without raising.

        Store initialization failures are reported as ``IO_ERROR`` results.
        """
        try:
            producer = self.producer()
        except (DiscoveryIOError, FileReadError) as e:
            return LookupResult.io_error(e)
        return producer.resolve(request)

    def clear(self) -> None:  # testing convenience
        """Drop the cached resolver and producer; the next access reloads from disk."""
        self._singletons.clear()


def build_container(config: Dict[str, Any] | PropertiesSettings | None = None) -> PropertiesContainer:
    """Construct and return a new PropertiesContainer instance.

    Args:
        config: Settings object, or a mapping of overrides merged on top of the
            file and environment configuration (see ``get_settings``).

    Returns:
        PropertiesContainer: The container; call ``start()`` to load eagerly.
    """
    if isinstance(config, PropertiesSettings):
        return PropertiesContainer(settings=config)
    return PropertiesContainer(settings=get_settings(config))


__all__ = ["PropertiesContainer", "build_container"]
