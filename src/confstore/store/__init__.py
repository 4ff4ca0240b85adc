"""Config store and its error taxonomy."""

from .config import Config
from .models import (
    ConfigDeserializationError,
    ConfigDoesNotExistError,
    ConfigError,
    ConfigErrorKind,
    ConfigFileNotSetError,
    ConfigFileOpenError,
    ConfigSerializationError,
)
from .protocol import ConfigStore

__all__ = [
    "Config",
    "ConfigDeserializationError",
    "ConfigDoesNotExistError",
    "ConfigError",
    "ConfigErrorKind",
    "ConfigFileNotSetError",
    "ConfigFileOpenError",
    "ConfigSerializationError",
    "ConfigStore",
]
