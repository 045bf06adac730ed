"""Exceptions raised for conditions that halt an operation."""

from __future__ import annotations

from pathlib import Path


class FoSwitchError(Exception):
    """Base exception for foswitch failures."""


class PathNotFoundError(FoSwitchError):
    """A path an operation depends on does not exist."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class ConfigNotFoundError(PathNotFoundError):
    """A platform configuration file is missing."""


class WorkspaceNotFoundError(PathNotFoundError):
    """The workspace directory is missing."""


class PackageStoreNotFoundError(FoSwitchError):
    """No package store directory could be located."""


class XmlDocumentError(FoSwitchError):
    """An XML document could not be read or parsed."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class XmlSettingNotFoundError(FoSwitchError):
    """An expected node or setting is absent from an XML document."""

    def __init__(self, path: Path, key: str, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.key = key


class ConfigWriteError(FoSwitchError):
    """A configuration file could not be written back to disk."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class ConfigFileError(FoSwitchError):
    """The foswitch YAML config file is malformed."""

    def __init__(
        self,
        path: Path,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.line = line
        self.column = column
        self.field = field


class EnvironmentControlError(FoSwitchError):
    """The environment stop command failed."""
