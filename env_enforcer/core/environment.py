"""
Environment lookup capability.

The validator never touches ``os.environ`` directly; it asks an
``EnvironmentLookup`` for each key so tests can supply a plain mapping.
"""

import os
from typing import Mapping, Optional, Protocol


class EnvironmentLookup(Protocol):
    """Read-only name -> value source."""

    def lookup(self, name: str) -> Optional[str]:
        ...


class ProcessEnvironment:
    """Reads the live process environment on every call."""

    def lookup(self, name: str) -> Optional[str]:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "ProcessEnvironment()"


class MappingEnvironment:
    """Wraps a caller-supplied mapping; missing names resolve to None."""

    def __init__(self, values: Mapping[str, str]):
        self._values = values

    def lookup(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def __repr__(self) -> str:
        return f"MappingEnvironment(keys={sorted(self._values)})"
