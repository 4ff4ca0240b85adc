"""confstore - a typed key-value config store backed by a YAML document.

By default, confstore's internal logging is disabled when used as a library.
Library users can enable logging by calling confstore.enable_logging().
"""

from confstore.common import disable_library_logging, enable_library_logging
from confstore.store import (
    Config,
    ConfigDeserializationError,
    ConfigDoesNotExistError,
    ConfigError,
    ConfigErrorKind,
    ConfigFileNotSetError,
    ConfigFileOpenError,
    ConfigSerializationError,
    ConfigStore,
)

disable_library_logging()

enable_logging = enable_library_logging

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
    "enable_logging",
]
