"""Logging utilities for StorageMap using Loguru.

This module provides logging configuration for both CLI and library usage:
- CLI usage: File-based logging with rotation and retention
- Library usage: Logging disabled by default, can be enabled by library users
"""

import sys
from pathlib import Path
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from storagemap.constants import APP_NAME

from .models import AppDirectories, AppInfo
from .paths import get_data_directory_from_dirs


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_file: str | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")


def setup_cli_logging(
    app_info: AppInfo,
    config: LoggingConfig,
    directories: AppDirectories,
    namespace: str,
) -> int:
    """Route StorageMap logs to a rotating file for one CLI invocation.

    Records carry the storage ``namespace`` the command works on. Without an explicit
    ``log_file`` each namespace logs to ``<data dir>/logs/<namespace>.log``.
    """
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment, "namespace": namespace})

    log_file = (
        Path(config.log_file).expanduser() if config.log_file else _get_default_log_file_path(directories, namespace)
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler_options: dict[str, object] = {
        "level": config.log_level,
        "rotation": config.rotation,
        "retention": config.retention,
        "diagnose": app_info.environment == "dev",
    }
    if config.format == "json":
        handler_options["serialize"] = True
    else:
        handler_options["format"] = _get_text_format()

    handler_id = logger.add(log_file, **handler_options)

    logger.debug(
        "CLI logging initialized",
        log_file=str(log_file),
        level=config.log_level,
        format=config.format,
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


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"


def _get_default_log_file_path(directories: AppDirectories, namespace: str) -> Path:
    return get_data_directory_from_dirs(directories) / "logs" / f"{namespace}.log"
