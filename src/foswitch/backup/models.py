"""Backup operation result models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from foswitch.common import OperationStatus


class FileOperation(str, Enum):
    BACKUP = "backup"
    RESTORE = "restore"
    DELETE = "delete"


class FileOperationResult(BaseModel):
    """Reported outcome of a backup, restore or delete on one file."""

    model_config = ConfigDict(extra="forbid")

    operation: FileOperation
    path: Path | None
    backup_path: Path | None = None
    status: OperationStatus
    message: str

    @property
    def failed(self) -> bool:
        return self.status == OperationStatus.ERROR
