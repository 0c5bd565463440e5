"""Pytest configuration for the properties test suite.

Clears the library's environment variables for every test and restores the
shared logger afterwards so level or handler changes do not leak.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator, List

import pytest

from properties_di.base.logging import configure_logger
from properties_di.config.defaults import CONFIG_FILE_ENV
from properties_di.config.env import ENV_MAP
from properties_di.injection.producer import PropertyValueProducer
from properties_di.store.resolver import PropertyResolver

FIXTURES = Path(__file__).resolve().parent / "fixtures"
BASE_ROOT = FIXTURES / "base"
EXTRA_ROOT = FIXTURES / "extra"


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run each test without ``PROPERTIES_DI_*`` variables and reset logging after it."""
    for name in ENV_MAP.values():
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
    yield
    configure_logger(level=logging.INFO, file_path=None, json_mode=True)


@pytest.fixture()
def fixture_roots() -> List[Path]:
    return [BASE_ROOT, EXTRA_ROOT]


@pytest.fixture()
def base_resolver() -> PropertyResolver:
    """Resolver over ``testProperties.properties`` only."""
    return PropertyResolver.from_roots(BASE_ROOT)


@pytest.fixture()
def producer(fixture_roots: List[Path]) -> PropertyValueProducer:
    """Producer over both fixture roots."""
    return PropertyValueProducer(PropertyResolver.from_roots(fixture_roots))


@pytest.fixture()
def write_properties(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing ``text`` (or raw ``data`` bytes) to ``tmp_path/name``."""

    def _write(name: str, text: str | None = None, *, data: bytes | None = None, root: Path | None = None) -> Path:
        target = (root or tmp_path) / name
        target.parent.mkdir(parents=True, exist_ok=True)
        if data is not None:
            target.write_bytes(data)
        else:
            target.write_text(text or "", encoding="iso-8859-1")
        return target

    return _write
