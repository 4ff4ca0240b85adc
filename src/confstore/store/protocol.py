"""Config store protocol."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Self

from result import Result

from confstore.document import DocumentValue

from .models import ConfigError


class ConfigStore(Protocol):
    """Typed key-value store over a document tree with optional file persistence."""

    @property
    def file(self) -> Path | None: ...

    def with_file(self, path: str | Path) -> Self:
        """Return a store backed by `path`. Performs no I/O."""
        ...

    def add(self, name: str, value: object) -> Result[None, ConfigError]:
        """Encode `value` and store it under `name`, replacing any previous entry."""
        ...

    def get[T](self, name: str, type_: type[T]) -> Result[T, ConfigError]:
        """Decode the entry stored under `name` into `type_`."""
        ...

    def get_raw(self, name: str) -> Result[DocumentValue, ConfigError]: ...

    def remove(self, name: str) -> Result[DocumentValue, ConfigError]: ...

    def contains(self, name: str) -> bool: ...

    def keys(self) -> list[str]: ...

    def read_from_file(self) -> Result[None, ConfigError]:
        """Replace every in-memory entry with the content of the backing file."""
        ...

    def write_to_file(self) -> Result[None, ConfigError]:
        """Overwrite the backing file with every in-memory entry."""
        ...
