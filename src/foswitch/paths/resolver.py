"""Well-known file locations for the platform and IDE configuration."""

from __future__ import annotations

from pathlib import Path

from foswitch.common import create_logger
from foswitch.config import SwitchConfig
from foswitch.constants import (
    DEFAULT_IDE_VERSION_TOKEN,
    DEV_CONFIG_RELATIVE_PATH,
    IDE_SETTINGS_PATTERN,
    IDE_VERSION_TOKENS,
    PACKAGE_STORE_RELATIVE_PATH,
    WEB_CONFIG_FILENAME,
)
from foswitch.errors import ConfigNotFoundError, PackageStoreNotFoundError
from foswitch.xmlconfig import DevConfigDocument

from .drives import FixedDriveProvider
from .protocol import DriveProvider

logger = create_logger("paths")


def ide_version_token(version_label: str | None) -> str:
    """Map an IDE version label (``VS2019``, ``vs2022``...) to its settings folder token."""
    if not version_label:
        return DEFAULT_IDE_VERSION_TOKEN
    return IDE_VERSION_TOKENS.get(version_label.strip().upper(), DEFAULT_IDE_VERSION_TOKEN)


class PathResolver:
    def __init__(self, config: SwitchConfig, drives: DriveProvider | None = None) -> None:
        self.config = config
        self._drives = drives or FixedDriveProvider()

    def resolve_developer_config_path(self) -> Path:
        path = self.config.documents_dir / DEV_CONFIG_RELATIVE_PATH
        if not path.is_file():
            raise ConfigNotFoundError(path, f"Developer config file not found at {path}")
        return path

    def resolve_web_config_path(self, dev_config: Path | None = None) -> Path:
        dev_config = dev_config or self.resolve_developer_config_path()
        web_root = DevConfigDocument.load(dev_config).web_root()
        return web_root / WEB_CONFIG_FILENAME

    def resolve_ide_settings_path(self, version_label: str | None = None) -> Path | None:
        label = version_label if version_label is not None else self.config.ide_version
        pattern = IDE_SETTINGS_PATTERN.format(token=ide_version_token(label))
        matches = sorted(self.config.local_app_data_dir.glob(pattern))
        if not matches:
            logger.debug("No IDE settings file matched", base=str(self.config.local_app_data_dir), pattern=pattern)
            return None
        return matches[0]

    def resolve_package_store_directory(self, override: Path | None = None) -> Path:
        override = override if override is not None else self.config.package_store_dir
        if override is not None:
            if override.is_dir():
                return override
            logger.warning("Configured package store is not a directory, scanning drives", override=str(override))

        drives = self._drives.fixed_drives()
        for drive in drives:
            candidate = drive / PACKAGE_STORE_RELATIVE_PATH
            if candidate.is_dir():
                logger.debug("Package store found", path=str(candidate))
                return candidate

        searched = ", ".join(str(drive) for drive in drives) or "no fixed drives"
        raise PackageStoreNotFoundError(f"No '{PACKAGE_STORE_RELATIVE_PATH}' directory found on {searched}")
