"""Workspace switching, package linking and web config comparison."""

from .active import get_active_workspace
from .compare import WebConfigComparer, find_backup_web_config
from .linker import PackageLinker, metadata_dir_for
from .models import ActiveWorkspace, PackageLink, SettingComparison, SwitchOptions, SwitchReport
from .switcher import WorkspaceSwitcher, workspace_settings

__all__ = [
    "ActiveWorkspace",
    "PackageLink",
    "PackageLinker",
    "SettingComparison",
    "SwitchOptions",
    "SwitchReport",
    "WebConfigComparer",
    "WorkspaceSwitcher",
    "find_backup_web_config",
    "get_active_workspace",
    "metadata_dir_for",
    "workspace_settings",
]
