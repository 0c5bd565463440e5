"""DI container for the properties library.

Acts as the composition root: owns settings, the resolver singleton and the
producer handed to consumers.
"""
from __future__ import annotations

from .container import PropertiesContainer, build_container

__all__ = ["PropertiesContainer", "build_container"]
