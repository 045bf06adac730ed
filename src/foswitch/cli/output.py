"""Shared console output for CLI commands."""

from __future__ import annotations

import typer

from foswitch.backup import FileOperationResult
from foswitch.common import OperationStatus
from foswitch.errors import (
    ConfigFileError,
    ConfigNotFoundError,
    ConfigWriteError,
    FoSwitchError,
    PackageStoreNotFoundError,
    WorkspaceNotFoundError,
    XmlSettingNotFoundError,
)

_STATUS_STYLES = {
    OperationStatus.SUCCESS: ("✓", typer.colors.GREEN),
    OperationStatus.SKIPPED: ("-", typer.colors.YELLOW),
    OperationStatus.EXCLUDED: ("-", typer.colors.YELLOW),
    OperationStatus.UNCHANGED: ("=", typer.colors.CYAN),
    OperationStatus.ERROR: ("✗", typer.colors.RED),
}


def echo_status(status: OperationStatus, message: str) -> None:
    symbol, color = _STATUS_STYLES[status]
    typer.secho(f"{symbol} {message}", fg=color, err=status == OperationStatus.ERROR)


def echo_results(results: list[FileOperationResult]) -> None:
    """Print each result and exit with code 1 if any step failed."""
    for result in results:
        echo_status(result.status, result.message)
    if any(result.failed for result in results):
        raise typer.Exit(code=1)


def handle_error(error: FoSwitchError) -> None:
    """Handle fatal errors with user-friendly messages."""
    typer.secho(f"error: {error}", err=True, fg=typer.colors.RED)
    match error:
        case ConfigNotFoundError():
            hint = "hint: set FOSWITCH_DOCUMENTS_DIR if your documents folder is not in the default location"
            typer.secho(hint, err=True, fg=typer.colors.CYAN)
        case WorkspaceNotFoundError():
            typer.secho("hint: create the workspace directory first", err=True, fg=typer.colors.CYAN)
        case PackageStoreNotFoundError():
            typer.secho("hint: pass --package-store to point at the package store", err=True, fg=typer.colors.CYAN)
        case XmlSettingNotFoundError(key=key):
            typer.secho(f"hint: '{key}' must be present for the file to be updated", err=True, fg=typer.colors.CYAN)
        case ConfigWriteError():
            hint = "hint: the file may be locked by a running service, stop the environment and retry"
            typer.secho(hint, err=True, fg=typer.colors.CYAN)
        case ConfigFileError(line=line, column=column, field=field):
            if line is not None:
                typer.secho(f"  at line {line}, column {column}", err=True)
            elif field is not None:
                typer.secho(f"  field: {field}", err=True)
