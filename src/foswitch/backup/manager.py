"""Backup, restore and cleanup of the configuration files foswitch edits.

A backup is a sibling of the original named ``<stem>_OrigBackup<suffix>``.
At most one exists per file: creating a backup never overwrites an existing
one, so the first snapshot taken stays the known-good state until deleted.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

from foswitch.common import OperationStatus, create_logger
from foswitch.constants import BACKUP_SUFFIX
from foswitch.paths import PathResolver

from .models import FileOperation, FileOperationResult

logger = create_logger("backup")

ConfirmCallback = Callable[[str], bool]


def backup_path_for(path: Path) -> Path:
    return path.with_name(f"{path.stem}{BACKUP_SUFFIX}{path.suffix}")


class BackupManager:
    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver

    def backup_file(self, path: Path) -> FileOperationResult:
        backup_path = backup_path_for(path)
        if not path.is_file():
            return self._report(FileOperation.BACKUP, path, None, OperationStatus.ERROR, f"File not found: {path}")
        if backup_path.exists():
            return self._report(
                FileOperation.BACKUP,
                path,
                backup_path,
                OperationStatus.SKIPPED,
                f"Backup already exists, skipped: {backup_path}",
            )

        try:
            shutil.copy2(path, backup_path)
        except OSError as exc:
            return self._report(
                FileOperation.BACKUP, path, backup_path, OperationStatus.ERROR, f"Backup of {path} failed: {exc}"
            )
        return self._report(
            FileOperation.BACKUP, path, backup_path, OperationStatus.SUCCESS, f"Backup created: {backup_path}"
        )

    def restore_file(self, path: Path) -> FileOperationResult:
        backup_path = backup_path_for(path)
        if not backup_path.is_file():
            return self._report(
                FileOperation.RESTORE, path, backup_path, OperationStatus.ERROR, f"No backup found: {backup_path}"
            )

        try:
            shutil.copy2(backup_path, path)
        except OSError as exc:
            return self._report(
                FileOperation.RESTORE, path, backup_path, OperationStatus.ERROR, f"Restore of {path} failed: {exc}"
            )
        return self._report(
            FileOperation.RESTORE, path, backup_path, OperationStatus.SUCCESS, f"Restored {path} from {backup_path}"
        )

    def delete_backup(self, path: Path) -> FileOperationResult:
        backup_path = backup_path_for(path)
        if not backup_path.is_file():
            return self._report(
                FileOperation.DELETE, path, backup_path, OperationStatus.ERROR, f"No backup found: {backup_path}"
            )

        try:
            backup_path.unlink()
        except OSError as exc:
            return self._report(
                FileOperation.DELETE, path, backup_path, OperationStatus.ERROR, f"Deleting {backup_path} failed: {exc}"
            )
        return self._report(
            FileOperation.DELETE, path, backup_path, OperationStatus.SUCCESS, f"Backup deleted: {backup_path}"
        )

    def backup_all(self) -> list[FileOperationResult]:
        dev_config, web_config = self._platform_files()
        results = [self.backup_file(dev_config), self.backup_file(web_config)]

        ide_settings = self._resolver.resolve_ide_settings_path()
        if ide_settings is None:
            results.append(self._ide_not_found(FileOperation.BACKUP))
        else:
            results.append(self.backup_file(ide_settings))
        return results

    def restore_all(self, include_ide: bool = False) -> list[FileOperationResult]:
        dev_config, web_config = self._platform_files()
        results = [self.restore_file(dev_config), self.restore_file(web_config)]
        results.append(self._ide_step(FileOperation.RESTORE, include_ide, self.restore_file))
        return results

    def delete_all_backups(self, confirm: ConfirmCallback, include_ide: bool = False) -> list[FileOperationResult]:
        """Delete every backup after an explicit confirmation.

        Returns an empty list, with nothing deleted, when ``confirm`` declines.
        """
        if not confirm("Delete all configuration backups?"):
            logger.info("Backup deletion declined")
            return []

        dev_config, web_config = self._platform_files()
        results = [self.delete_backup(dev_config), self.delete_backup(web_config)]
        results.append(self._ide_step(FileOperation.DELETE, include_ide, self.delete_backup))
        return results

    def _platform_files(self) -> tuple[Path, Path]:
        dev_config = self._resolver.resolve_developer_config_path()
        return dev_config, self._resolver.resolve_web_config_path(dev_config)

    def _ide_step(
        self,
        operation: FileOperation,
        include_ide: bool,
        action: Callable[[Path], FileOperationResult],
    ) -> FileOperationResult:
        if not include_ide:
            return self._report(
                operation, None, None, OperationStatus.EXCLUDED, f"IDE files were excluded from {operation.value}"
            )
        ide_settings = self._resolver.resolve_ide_settings_path()
        if ide_settings is None:
            return self._ide_not_found(operation)
        return action(ide_settings)

    def _ide_not_found(self, operation: FileOperation) -> FileOperationResult:
        return self._report(operation, None, None, OperationStatus.SKIPPED, "IDE settings file not found")

    def _report(
        self,
        operation: FileOperation,
        path: Path | None,
        backup_path: Path | None,
        status: OperationStatus,
        message: str,
    ) -> FileOperationResult:
        result = FileOperationResult(
            operation=operation,
            path=path,
            backup_path=backup_path,
            status=status,
            message=message,
        )
        log = logger.warning if status == OperationStatus.ERROR else logger.info
        log("{operation} {status}: {detail}", operation=operation.value, status=status.value, detail=message)
        return result
