"""Workspace operation models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from foswitch.common import OperationStatus


class SwitchOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    switch_packages: bool = True
    switch_ide_default_projects_path: bool = True


class SwitchReport(BaseModel):
    """What a workspace switch changed."""

    model_config = ConfigDict(extra="forbid")

    workspace_dir: Path
    metadata_dir: Path
    projects_dir: Path
    previous_metadata_dir: Path | None
    current_metadata_dir: Path | None
    packages_switched: bool
    ide_settings_path: Path | None = None
    ide_status: OperationStatus | None = None


class PackageLink(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    link: Path
    target: Path
    replaced: bool


class SettingComparison(BaseModel):
    """One web config setting compared between the live file and a backup."""

    model_config = ConfigDict(extra="forbid")

    key: str
    current_value: str | None
    backup_value: str | None
    values_match: bool | None
    message: str | None = None


class ActiveWorkspace(BaseModel):
    model_config = ConfigDict(extra="forbid")

    metadata_dir: Path | None
    workspace_dir: Path | None
