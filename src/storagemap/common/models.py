"""Common models used across StorageMap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel

from storagemap.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


@dataclass(frozen=True)
class AppDirectories:
    """Application directory settings.

    Attributes:
        app_name: Name used for the XDG data directory (~/.local/share/{app_name}/)
    """

    app_name: str = APP_NAME
