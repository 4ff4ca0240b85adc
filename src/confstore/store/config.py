"""Typed key-value config store backed by a YAML document."""

from __future__ import annotations

import copy
from pathlib import Path

from result import Err, Ok, Result, is_err

from confstore.codec import CodecError, DocumentCodec, YamlCodec
from confstore.common import create_logger
from confstore.document import DocumentMapping, DocumentValue, expect_mapping
from confstore.settings import get_settings

from .models import (
    ConfigDeserializationError,
    ConfigDoesNotExistError,
    ConfigError,
    ConfigFileNotSetError,
    ConfigFileOpenError,
    ConfigSerializationError,
)

logger = create_logger("store")


class Config:
    """In-memory config store whose root is a single string-keyed mapping.

    Entries are stored as encoded document trees, so `get` can decode them into any
    compatible type. The store does no recovery of its own: every codec or filesystem
    failure comes back as an `Err` carrying one of the `ConfigError` models.
    """

    def __init__(self, file: str | Path | None = None, codec: DocumentCodec | None = None) -> None:
        self._root: DocumentMapping = {}
        self._file = Path(file) if file is not None else None
        self._codec = codec if codec is not None else YamlCodec(get_settings().codec)

    @classmethod
    def new(cls) -> Config:
        return cls()

    @property
    def file(self) -> Path | None:
        return self._file

    @property
    def codec(self) -> DocumentCodec:
        return self._codec

    @property
    def root(self) -> DocumentMapping:
        """A copy of the root mapping; mutating it does not affect the store."""
        return copy.deepcopy(self._root)

    def with_file(self, path: str | Path) -> Config:
        config = Config(file=path, codec=self._codec)
        config._root = copy.deepcopy(self._root)
        return config

    def add(self, name: str, value: object) -> Result[None, ConfigError]:
        _require_key(name)

        encoded = self._codec.encode_value(value)
        if is_err(encoded):
            logger.error("Config entry serialization failed", key=name, error=encoded.err_value.message)
            return Err(ConfigSerializationError(message=encoded.err_value.message))

        self._root[name] = encoded.ok_value
        logger.debug("Config entry added", key=name)
        return Ok(None)

    def get[T](self, name: str, type_: type[T]) -> Result[T, ConfigError]:
        _require_key(name)

        if name not in self._root:
            logger.warning("Config entry not found", key=name)
            return Err(_does_not_exist(name))

        return self._codec.decode_value(self._root[name], type_).map_err(
            lambda codec_error: _deserialization_failed(name, codec_error)
        )

    def get_raw(self, name: str) -> Result[DocumentValue, ConfigError]:
        _require_key(name)

        if name not in self._root:
            return Err(_does_not_exist(name))

        return Ok(copy.deepcopy(self._root[name]))

    def remove(self, name: str) -> Result[DocumentValue, ConfigError]:
        _require_key(name)

        if name not in self._root:
            logger.warning("Config entry not found", key=name)
            return Err(_does_not_exist(name))

        logger.debug("Config entry removed", key=name)
        return Ok(self._root.pop(name))

    def contains(self, name: str) -> bool:
        return name in self._root

    def keys(self) -> list[str]:
        return list(self._root)

    def read_from_file(self) -> Result[None, ConfigError]:
        if self._file is None:
            logger.warning("Config read attempted without a file")
            return Err(ConfigFileNotSetError())

        path = self._file
        logger.debug("Reading config file", path=str(path))

        try:
            with path.open("rb") as handle:
                data = handle.read()
        except OSError as exc:
            logger.error("Config file open failed", path=str(path), error=str(exc))
            return Err(ConfigFileOpenError(path=path, message=str(exc)))

        decoded = self._codec.decode(data)
        if is_err(decoded):
            codec_error = decoded.err_value
            logger.error(
                "Config file parse error",
                path=str(path),
                line=codec_error.line,
                column=codec_error.column,
                error=codec_error.message,
            )
            return Err(ConfigDeserializationError(message=codec_error.message))

        document = decoded.ok_value
        if document is None:
            document = {}

        root = expect_mapping(document)
        if is_err(root):
            message = f"Config root must be a mapping of keys to values: {root.err_value.message}"
            logger.error("Config file has wrong shape", path=str(path), error=message)
            return Err(ConfigDeserializationError(message=message))

        self._root = root.ok_value
        logger.debug("Config file loaded", path=str(path), entries=len(self._root))
        return Ok(None)

    def write_to_file(self) -> Result[None, ConfigError]:
        if self._file is None:
            logger.warning("Config write attempted without a file")
            return Err(ConfigFileNotSetError())

        path = self._file

        encoded = self._codec.encode(self._root)
        if is_err(encoded):
            logger.error("Config serialization failed", path=str(path), error=encoded.err_value.message)
            return Err(ConfigSerializationError(message=encoded.err_value.message))

        try:
            with path.open("wb") as handle:
                handle.write(encoded.ok_value)
        except OSError as exc:
            logger.error("Config file write failed", path=str(path), error=str(exc))
            return Err(ConfigFileOpenError(path=path, message=str(exc)))

        logger.debug("Config file written", path=str(path), entries=len(self._root))
        return Ok(None)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __len__(self) -> int:
        return len(self._root)

    def __repr__(self) -> str:
        return f"Config(file={self._file!r}, keys={self.keys()!r})"


def _require_key(name: object) -> None:
    if not isinstance(name, str):
        raise TypeError(f"Config keys must be strings, got {type(name).__name__}")


def _does_not_exist(name: str) -> ConfigDoesNotExistError:
    return ConfigDoesNotExistError(key=name, message=f"Config entry '{name}' does not exist")


def _deserialization_failed(name: str, codec_error: CodecError) -> ConfigDeserializationError:
    logger.error("Config entry deserialization failed", key=name, error=codec_error.message)
    return ConfigDeserializationError(message=f"Config entry '{name}': {codec_error.message}")
