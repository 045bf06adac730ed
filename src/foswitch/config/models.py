"""Pydantic models for the foswitch config file and the resolved switch configuration."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.dataclasses import dataclass

from foswitch.common import LoggingConfig
from foswitch.constants import DEFAULT_IDE_VERSION


class DefaultsConfig(BaseModel):
    """Machine defaults (``defaults:`` section of config.yaml)."""

    model_config = ConfigDict(extra="forbid")

    documents_dir: Path | None = None
    local_app_data_dir: Path | None = None
    ide_version: str | None = None
    package_store_dir: Path | None = None
    stop_command: list[str] | None = None


class FileConfig(BaseModel):
    """Global configuration (~/.config/foswitch/config.yaml)."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)


def default_documents_dir() -> Path:
    profile = os.getenv("USERPROFILE")
    base_dir = Path(profile) if profile else Path.home()
    return base_dir / "Documents"


def default_local_app_data_dir() -> Path:
    local_app_data = os.getenv("LOCALAPPDATA")
    if local_app_data:
        return Path(local_app_data)
    return Path.home() / "AppData" / "Local"


@dataclass(kw_only=True, frozen=True)
class SwitchConfig:
    """Explicit configuration handed to every foswitch component.

    Attributes:
        documents_dir: The user's documents folder holding the developer config
        local_app_data_dir: The user's local application-data folder holding IDE settings
        ide_version: IDE version label such as ``VS2022``
        package_store_dir: Package store override; scanned for on fixed drives when unset
        stop_command: Command that stops the running environment before package switches
    """

    documents_dir: Path = Field(default_factory=default_documents_dir)
    local_app_data_dir: Path = Field(default_factory=default_local_app_data_dir)
    ide_version: str = DEFAULT_IDE_VERSION
    package_store_dir: Path | None = None
    stop_command: list[str] = Field(default_factory=list)
