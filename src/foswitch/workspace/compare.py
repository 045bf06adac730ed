"""Compare the live web config against a backed-up copy."""

from __future__ import annotations

from pathlib import Path

from foswitch.backup import backup_path_for
from foswitch.common import create_logger
from foswitch.constants import WEB_CONFIG_FILENAME, WORKSPACE_SETTING_KEYS
from foswitch.errors import ConfigNotFoundError
from foswitch.paths import PathResolver
from foswitch.xmlconfig import WebConfigDocument

from .models import SettingComparison

logger = create_logger("compare")


def find_backup_web_config(backup_dir: Path) -> Path:
    for candidate in (backup_dir / WEB_CONFIG_FILENAME, backup_path_for(backup_dir / WEB_CONFIG_FILENAME)):
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(backup_dir, f"No {WEB_CONFIG_FILENAME} found in {backup_dir}")


class WebConfigComparer:
    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver

    def compare_web_config(self, backup_dir: Path) -> list[SettingComparison]:
        live = WebConfigDocument.load(self._resolver.resolve_web_config_path())
        backup = WebConfigDocument.load(find_backup_web_config(backup_dir))
        logger.debug("Comparing web config", live=str(live.path), backup=str(backup.path))
        return [_compare_setting(key, live, backup) for key in WORKSPACE_SETTING_KEYS]


def _compare_setting(key: str, live: WebConfigDocument, backup: WebConfigDocument) -> SettingComparison:
    current_value = live.get_setting(key)
    backup_value = backup.get_setting(key)

    problems = [
        problem
        for problem in (_absence(live, key, "current"), _absence(backup, key, "backup"))
        if problem is not None
    ]
    if problems:
        return SettingComparison(
            key=key,
            current_value=current_value,
            backup_value=backup_value,
            values_match=None,
            message="; ".join(problems),
        )

    return SettingComparison(
        key=key,
        current_value=current_value,
        backup_value=backup_value,
        values_match=current_value == backup_value,
    )


def _absence(document: WebConfigDocument, key: str, label: str) -> str | None:
    if not document.has_setting(key):
        return f"Setting not found in {label} web config"
    if document.get_setting(key) is None:
        return f"Setting has no value in {label} web config"
    return None
