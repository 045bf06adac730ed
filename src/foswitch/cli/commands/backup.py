"""CLI commands for configuration backups."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from foswitch.backup import BackupManager
from foswitch.errors import FoSwitchError
from foswitch.paths import PathResolver

from ..output import echo_results, handle_error

FileArgument = Annotated[
    Path | None,
    typer.Argument(help="A single file to operate on. All configuration files are used when omitted."),
]
IncludeIdeOption = Annotated[
    bool,
    typer.Option("--include-ide", help="Also process the IDE settings file."),
]


def backup(ctx: typer.Context, file: FileArgument = None) -> None:
    """Create backups of the configuration files.

    Existing backups are never overwritten.

    Examples:

        # Back up developer config, web config and IDE settings
        foswitch backup

        # Back up a single file
        foswitch backup C:/AosService/webroot/web.config
    """
    manager = BackupManager(PathResolver(ctx.obj))
    try:
        results = [manager.backup_file(file)] if file else manager.backup_all()
    except FoSwitchError as error:
        handle_error(error)
        raise typer.Exit(code=1)
    echo_results(results)


def restore(ctx: typer.Context, file: FileArgument = None, include_ide: IncludeIdeOption = False) -> None:
    """Restore configuration files from their backups.

    Examples:

        # Restore developer config and web config
        foswitch restore

        # Restore IDE settings as well
        foswitch restore --include-ide
    """
    manager = BackupManager(PathResolver(ctx.obj))
    try:
        results = [manager.restore_file(file)] if file else manager.restore_all(include_ide=include_ide)
    except FoSwitchError as error:
        handle_error(error)
        raise typer.Exit(code=1)
    echo_results(results)


def delete_backups(
    ctx: typer.Context,
    file: FileArgument = None,
    include_ide: IncludeIdeOption = False,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation.")] = False,
) -> None:
    """Delete configuration backups.

    Examples:

        # Delete all backups after confirming
        foswitch delete-backups --include-ide
    """
    manager = BackupManager(PathResolver(ctx.obj))
    try:
        if file:
            results = [manager.delete_backup(file)]
        else:
            confirm = _always_confirm if yes else _prompt_confirm
            results = manager.delete_all_backups(confirm, include_ide=include_ide)
            if not results:
                typer.echo("Aborted, no backups were deleted.")
                return
    except FoSwitchError as error:
        handle_error(error)
        raise typer.Exit(code=1)
    echo_results(results)


def _always_confirm(_: str) -> bool:
    return True


def _prompt_confirm(message: str) -> bool:
    return typer.confirm(message, default=False)
