from __future__ import annotations

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from storagemap.common import AppDirectories, AppInfo, LoggingConfig
from storagemap.constants import APP_NAME


class StorageSettings(BaseModel):
    app_name: str = APP_NAME
    namespace: str = "default"


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    logging: LoggingConfig = LoggingConfig()
    storage: StorageSettings = StorageSettings()

    model_config = SettingsConfigDict(
        env_prefix="STORAGEMAP_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    def to_app_directories(self) -> AppDirectories:
        return AppDirectories(app_name=self.storage.app_name)


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next ``get_settings()`` re-reads the environment."""
    global _settings
    _settings = None


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "Settings",
    "StorageSettings",
    "get_settings",
    "reset_settings",
]
