"""Config store error models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict


class ConfigErrorKind(str, Enum):
    """Flat taxonomy of config store failures."""

    SERIALIZATION_FAILED = "serialization_failed"
    DESERIALIZATION_FAILED = "deserialization_failed"
    CONFIG_DOES_NOT_EXIST = "config_does_not_exist"
    FILE_OPEN_FAILED = "file_open_failed"
    FILE_DOES_NOT_SET = "file_does_not_set"


class ConfigSerializationError(BaseModel):
    """Encoding a value or the whole root failed."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[ConfigErrorKind.SERIALIZATION_FAILED] = ConfigErrorKind.SERIALIZATION_FAILED
    message: str


class ConfigDeserializationError(BaseModel):
    """Decoding a value or a file's content failed, or it had the wrong shape."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[ConfigErrorKind.DESERIALIZATION_FAILED] = ConfigErrorKind.DESERIALIZATION_FAILED
    message: str


class ConfigDoesNotExistError(BaseModel):
    """No entry is stored under the requested key."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[ConfigErrorKind.CONFIG_DOES_NOT_EXIST] = ConfigErrorKind.CONFIG_DOES_NOT_EXIST
    key: str
    message: str


class ConfigFileOpenError(BaseModel):
    """The backing file could not be opened, read or written."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[ConfigErrorKind.FILE_OPEN_FAILED] = ConfigErrorKind.FILE_OPEN_FAILED
    path: Path
    message: str


class ConfigFileNotSetError(BaseModel):
    """A file operation was attempted with no backing file configured."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal[ConfigErrorKind.FILE_DOES_NOT_SET] = ConfigErrorKind.FILE_DOES_NOT_SET
    message: str = "No config file is set"


type ConfigError = (
    ConfigSerializationError
    | ConfigDeserializationError
    | ConfigDoesNotExistError
    | ConfigFileOpenError
    | ConfigFileNotSetError
)
