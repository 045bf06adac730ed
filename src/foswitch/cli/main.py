from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from foswitch.common import create_logger, setup_cli_logging
from foswitch.config import FileConfig, get_config_file_path, load_config_file
from foswitch.errors import ConfigFileError
from foswitch.settings import Settings

from .commands import backup as backup_commands
from .commands import workspace as workspace_commands
from .output import handle_error

logger = create_logger("cli")

app = typer.Typer(
    help="Switch a development machine between metadata workspaces.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command("backup")(backup_commands.backup)
app.command("restore")(backup_commands.restore)
app.command("delete-backups")(backup_commands.delete_backups)
app.command("switch")(workspace_commands.switch)
app.command("link")(workspace_commands.link)
app.command("compare")(workspace_commands.compare)
app.command("active")(workspace_commands.active)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    ide_version: Annotated[
        str | None, typer.Option("--ide-version", help="IDE version label such as VS2019 or VS2022")
    ] = None,
    package_store: Annotated[
        Path | None, typer.Option("--package-store", help="Package store directory, skips the drive scan")
    ] = None,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    settings = Settings()
    if ide_version is not None:
        settings.ide_version = ide_version
    if package_store is not None:
        settings.package_store_dir = package_store

    file_config = _load_file_config(settings)
    _setup_logging(settings, file_config, colorize=ctx.color is not False)
    ctx.obj = settings.to_switch_config(file_config)


def _load_file_config(settings: Settings) -> FileConfig:
    try:
        return load_config_file(get_config_file_path(settings.paths))
    except ConfigFileError as error:
        handle_error(error)
        raise typer.Exit(code=1)


def _setup_logging(settings: Settings, file_config: FileConfig, *, colorize: bool) -> None:
    setup_cli_logging(
        app_info=settings.app,
        config=file_config.logging,
        paths=settings.paths,
        colorize=colorize,
    )
    logger.debug("CLI logging configured", config=file_config.logging.model_dump())


def main() -> None:
    """Entrypoint for the foswitch CLI."""
    app()
