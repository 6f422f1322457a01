import os
from collections.abc import Mapping
from typing import Protocol


class EnvSource(Protocol):
    """Environment lookup interface."""
    def lookup(self, name: str) -> str | None:
        """Returns the value of ``name``, or None when it is not set."""
        ...


class OsEnvironSource:
    """Process environment (os.environ), read at call time."""
    def lookup(self, name: str) -> str | None:
        return os.environ.get(name)

    def __repr__(self) -> str:
        return "OsEnvironSource()"


class MappingSource:
    """Mapping-backed environment, for tests and embedded use."""
    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self.values = values if values is not None else {}

    def lookup(self, name: str) -> str | None:
        return self.values.get(name)

    def __repr__(self) -> str:
        return f"MappingSource({len(self.values)} vars)"
