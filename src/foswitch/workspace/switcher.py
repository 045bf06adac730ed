"""Point the platform and the IDE at a different workspace."""

from __future__ import annotations

from pathlib import Path

from foswitch.common import OperationStatus, create_logger
from foswitch.constants import (
    BIN_DIR_NAME,
    DEV_TOOLS_BINDIR_KEY,
    METADATA_DIR_NAME,
    PROJECTS_DIR_NAME,
    WORKSPACE_SETTING_KEYS,
)
from foswitch.environment import EnvironmentController, EnvironmentSettingsProvider
from foswitch.paths import PathResolver
from foswitch.xmlconfig import IdeSettingsDocument, WebConfigDocument

from .models import SwitchOptions, SwitchReport

logger = create_logger("workspace")


def workspace_settings(metadata_dir: Path) -> dict[str, str]:
    """Web config values that make ``metadata_dir`` the active metadata directory."""
    values = {key: str(metadata_dir) for key in WORKSPACE_SETTING_KEYS}
    values[DEV_TOOLS_BINDIR_KEY] = str(metadata_dir / BIN_DIR_NAME)
    return values


class WorkspaceSwitcher:
    def __init__(
        self,
        resolver: PathResolver,
        environment_settings: EnvironmentSettingsProvider,
        environment_controller: EnvironmentController,
    ) -> None:
        self._resolver = resolver
        self._environment_settings = environment_settings
        self._environment_controller = environment_controller

    def switch_workspace(self, workspace_dir: Path, options: SwitchOptions | None = None) -> SwitchReport:
        """Rewrite the web config (and optionally the IDE settings) to use ``workspace_dir``.

        Every setting is updated in memory before the file is saved, so a missing
        setting aborts the switch without writing anything.

        Raises:
            ConfigNotFoundError: The developer config file does not exist.
            XmlSettingNotFoundError: A workspace setting is absent from the web config.
            ConfigWriteError: The web config could not be saved.
        """
        options = options or SwitchOptions()
        metadata_dir = workspace_dir / METADATA_DIR_NAME
        projects_dir = workspace_dir / PROJECTS_DIR_NAME

        web_config = WebConfigDocument.load(self._resolver.resolve_web_config_path())

        previous = self._environment_settings.metadata_directory()
        logger.info("Active metadata directory before switch", metadata_dir=str(previous))

        if options.switch_packages:
            self._environment_controller.stop()
            for key, value in workspace_settings(metadata_dir).items():
                web_config.set_setting(key, value)
            web_config.save()
            logger.info("Web config updated", path=str(web_config.path), metadata_dir=str(metadata_dir))

        ide_settings_path: Path | None = None
        ide_status: OperationStatus | None = None
        if options.switch_ide_default_projects_path:
            ide_settings_path, ide_status = self._switch_ide_projects_location(projects_dir)

        current = self._environment_settings.metadata_directory()
        logger.info("Active metadata directory after switch", metadata_dir=str(current))

        return SwitchReport(
            workspace_dir=workspace_dir,
            metadata_dir=metadata_dir,
            projects_dir=projects_dir,
            previous_metadata_dir=previous,
            current_metadata_dir=current,
            packages_switched=options.switch_packages,
            ide_settings_path=ide_settings_path,
            ide_status=ide_status,
        )

    def _switch_ide_projects_location(self, projects_dir: Path) -> tuple[Path | None, OperationStatus]:
        ide_settings_path = self._resolver.resolve_ide_settings_path()
        if ide_settings_path is None:
            logger.warning("IDE settings file not found, default projects path left unchanged")
            return None, OperationStatus.SKIPPED

        document = IdeSettingsDocument.load(ide_settings_path)
        target = str(projects_dir)
        if document.projects_location() == target:
            logger.info("IDE default projects path already set, no change made", projects_dir=target)
            return ide_settings_path, OperationStatus.UNCHANGED

        document.set_projects_location(target)
        document.save()
        logger.info("IDE default projects path updated", path=str(ide_settings_path), projects_dir=target)
        return ide_settings_path, OperationStatus.SUCCESS
