"""Logging utilities for confstore using Loguru.

confstore is a library first, so its logging is disabled on import. Callers opt in:
- Library usage: `enable_library_logging()` sends records to stderr
- Application usage: `setup_logging()` installs a dev (coloured) or prod (JSON) sink,
  optionally backed by a rotating log file
"""

import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from confstore.constants import APP_NAME

from .models import AppInfo

type Logger = "loguru.Logger"


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_file: str | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")


@lru_cache
def get_color_from_name(name: str | None) -> str:
    """
    Map a name to a predefined color in a deterministic way.
    """
    colors = [
        "blue",
        "magenta",
        "yellow",
        "white",
        "light-blue",
        "light-green",
        "light-magenta",
        "light-yellow",
    ]

    if not name:
        return colors[0]

    name_hash = sum(ord(c) for c in name)
    return colors[name_hash % len(colors)]


def get_dev_logs_format(record: "loguru.Record") -> str:
    """Coloured format with the logger scope up front and extras at the end."""
    scope = record["extra"].get("scope", None)
    module_color = f"<{get_color_from_name(scope)}>"

    extra_fields = {k: v for k, v in record["extra"].items() if k not in ["scope", "env"]}
    extra_str = ""
    if extra_fields:
        extra_str = " | " + " ".join(f"{k}={v}" for k, v in extra_fields.items())

    return (
        f"{module_color}[{{extra[scope]}}]</> | "
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}:{function}:{line}</cyan> - "
        "<level>{message}</level>"
        f"{extra_str}\n{{exception}}"
    )


def setup_logging(app_info: AppInfo, config: LoggingConfig) -> int:
    """
    Configure Loguru for an application embedding confstore.

    With `log_file` set, records go to a rotating file. Otherwise the dev environment gets
    colourised stderr output and every other environment gets JSON on stdout.
    """
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "global", "env": app_info.environment})

    if config.log_file:
        log_file = Path(config.log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler_id = logger.add(
            log_file,
            level=config.log_level,
            rotation=config.rotation,
            retention=config.retention,
            format=_get_text_format(),
            diagnose=(app_info.environment == "dev"),
        )
    elif app_info.environment == "dev":
        handler_id = logger.add(sys.stderr, level=config.log_level, format=get_dev_logs_format, colorize=True)
    else:
        handler_id = logger.add(sys.stdout, level=config.log_level, serialize=True, format="{message}", diagnose=False)

    logger.debug(
        "Logging initialized",
        project=app_info.project_name,
        version=app_info.version,
        level=config.log_level,
    )

    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    return logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )


def create_logger(scope: str) -> Logger:
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
