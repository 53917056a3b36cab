"""Common models and helpers used across StorageMap modules."""

from .logging import (
    LoggingConfig,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    setup_cli_logging,
)
from .models import AppDirectories, AppInfo
from .paths import get_data_directory_from_dirs

__all__ = [
    "AppDirectories",
    "AppInfo",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory_from_dirs",
    "setup_cli_logging",
]
