from __future__ import annotations

from foswitch.constants import METADATA_DIR_NAME
from foswitch.environment import EnvironmentSettingsProvider

from .models import ActiveWorkspace


def get_active_workspace(environment_settings: EnvironmentSettingsProvider) -> ActiveWorkspace:
    metadata_dir = environment_settings.metadata_directory()
    if metadata_dir is None:
        return ActiveWorkspace(metadata_dir=None, workspace_dir=None)

    workspace_dir = metadata_dir.parent if metadata_dir.name == METADATA_DIR_NAME else None
    return ActiveWorkspace(metadata_dir=metadata_dir, workspace_dir=workspace_dir)
