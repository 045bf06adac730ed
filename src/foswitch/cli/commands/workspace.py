"""CLI commands for switching and inspecting workspaces."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Literal

import typer
import yaml

from foswitch.common import OperationStatus
from foswitch.config import SwitchConfig
from foswitch.environment import CommandEnvironmentController, WebConfigEnvironmentSettings
from foswitch.errors import FoSwitchError
from foswitch.paths import PathResolver
from foswitch.workspace import (
    PackageLinker,
    SettingComparison,
    SwitchOptions,
    WebConfigComparer,
    WorkspaceSwitcher,
    get_active_workspace,
)

from ..output import echo_status, handle_error

WorkspaceArgument = Annotated[Path, typer.Argument(help="Workspace directory containing Metadata and Projects.")]
FormatOption = Annotated[
    Literal["table", "yaml", "json"],
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format."),
]


def switch(
    ctx: typer.Context,
    workspace: WorkspaceArgument,
    packages: Annotated[
        bool, typer.Option("--packages/--no-packages", help="Point the web config at the workspace metadata.")
    ] = True,
    ide: Annotated[
        bool, typer.Option("--ide/--no-ide", help="Point the IDE default projects path at the workspace.")
    ] = True,
) -> None:
    """Switch the machine to another workspace.

    Examples:

        # Switch web config and IDE settings
        foswitch switch D:/Workspaces/Main

        # Only update the IDE default projects path
        foswitch switch D:/Workspaces/Main --no-packages
    """
    config: SwitchConfig = ctx.obj
    resolver = PathResolver(config)
    switcher = WorkspaceSwitcher(
        resolver,
        WebConfigEnvironmentSettings(resolver),
        CommandEnvironmentController(config.stop_command),
    )
    options = SwitchOptions(switch_packages=packages, switch_ide_default_projects_path=ide)

    try:
        report = switcher.switch_workspace(workspace, options)
    except FoSwitchError as error:
        handle_error(error)
        raise typer.Exit(code=1)

    typer.echo(f"Previous metadata directory: {report.previous_metadata_dir or 'unknown'}")
    if report.packages_switched:
        echo_status(OperationStatus.SUCCESS, f"Web config now uses {report.metadata_dir}")
    match report.ide_status:
        case OperationStatus.SUCCESS:
            echo_status(report.ide_status, f"IDE default projects path set to {report.projects_dir}")
        case OperationStatus.UNCHANGED:
            echo_status(report.ide_status, "IDE default projects path already correct, no change made")
        case OperationStatus.SKIPPED:
            echo_status(report.ide_status, "IDE settings file not found, default projects path not changed")
    typer.echo(f"Current metadata directory: {report.current_metadata_dir or 'unknown'}")


def link(ctx: typer.Context, workspace: WorkspaceArgument) -> None:
    """Link every package store package into the workspace metadata directory.

    Examples:

        foswitch link D:/Workspaces/Main
    """
    linker = PackageLinker(PathResolver(ctx.obj))
    try:
        links = linker.link_packages(workspace)
    except FoSwitchError as error:
        handle_error(error)
        raise typer.Exit(code=1)
    except OSError as error:
        typer.secho(f"error: failed to link packages: {error}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    for package_link in links:
        action = "replaced" if package_link.replaced else "linked"
        echo_status(OperationStatus.SUCCESS, f"{package_link.name} {action} -> {package_link.target}")
    package_text = "package" if len(links) == 1 else "packages"
    typer.echo(f"{len(links)} {package_text} linked")


def compare(
    ctx: typer.Context,
    backup_dir: Annotated[Path, typer.Argument(help="Directory holding the backed-up web.config.")],
    format: FormatOption = "table",
) -> None:
    """Compare workspace settings in the live web config with a backup.

    Examples:

        foswitch compare D:/Backups/webroot --format yaml
    """
    comparer = WebConfigComparer(PathResolver(ctx.obj))
    try:
        rows = comparer.compare_web_config(backup_dir)
    except FoSwitchError as error:
        handle_error(error)
        raise typer.Exit(code=1)

    selected_format = format.lower()
    if selected_format == "table":
        for row in rows:
            _echo_comparison(row)
        return

    payload = [row.model_dump(mode="json") for row in rows]
    if selected_format == "json":
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(yaml.safe_dump(payload, sort_keys=False))


def active(ctx: typer.Context) -> None:
    """Show the workspace the platform currently uses."""
    resolver = PathResolver(ctx.obj)
    try:
        workspace = get_active_workspace(WebConfigEnvironmentSettings(resolver))
    except FoSwitchError as error:
        handle_error(error)
        raise typer.Exit(code=1)

    if workspace.metadata_dir is None:
        typer.echo("No active metadata directory configured.")
        return
    typer.echo(f"Metadata directory: {workspace.metadata_dir}")
    if workspace.workspace_dir is not None:
        typer.echo(f"Workspace: {workspace.workspace_dir}")


def _echo_comparison(row: SettingComparison) -> None:
    typer.secho(row.key, fg=typer.colors.CYAN, bold=True)
    typer.echo(f"  Current Value: {row.current_value}")
    typer.echo(f"  Backup Value:  {row.backup_value}")
    if row.values_match is None:
        typer.secho(f"  {row.message}", fg=typer.colors.YELLOW)
    else:
        color = typer.colors.GREEN if row.values_match else typer.colors.RED
        typer.secho(f"  Values Match? {row.values_match}", fg=color)
