"""Path discovery utilities for StorageMap."""

from __future__ import annotations

import os
from pathlib import Path

from .models import AppDirectories


def get_data_directory_from_dirs(directories: AppDirectories) -> Path:
    """Get XDG data directory using AppDirectories.

    Returns ~/.local/share/{app_name} (or XDG_DATA_HOME/{app_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / directories.app_name
