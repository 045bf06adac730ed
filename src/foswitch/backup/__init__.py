"""Backup manager for configuration files."""

from .manager import BackupManager, ConfirmCallback, backup_path_for
from .models import FileOperation, FileOperationResult

__all__ = [
    "BackupManager",
    "ConfirmCallback",
    "FileOperation",
    "FileOperationResult",
    "backup_path_for",
]
