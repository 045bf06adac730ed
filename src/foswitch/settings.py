from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from foswitch.common import AppInfo, AppPaths
from foswitch.config import FileConfig, SwitchConfig


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()

    documents_dir: Path | None = None
    local_app_data_dir: Path | None = None
    ide_version: str | None = None
    package_store_dir: Path | None = None
    stop_command: list[str] | None = None

    model_config = SettingsConfigDict(
        env_prefix="FOSWITCH_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    def to_switch_config(self, file_config: FileConfig | None = None) -> SwitchConfig:
        """Merge environment values over config file defaults."""
        defaults = file_config.defaults if file_config else None
        overrides = {
            "documents_dir": self.documents_dir,
            "local_app_data_dir": self.local_app_data_dir,
            "ide_version": self.ide_version,
            "package_store_dir": self.package_store_dir,
            "stop_command": self.stop_command,
        }
        values = {}
        for field_name, value in overrides.items():
            if value is None and defaults is not None:
                value = getattr(defaults, field_name)
            if value is not None:
                values[field_name] = value
        return SwitchConfig(**values)

