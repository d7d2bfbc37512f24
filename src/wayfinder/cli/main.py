from __future__ import annotations

import os
from typing import Annotated

import typer

from wayfinder.common import setup_cli_logging
from wayfinder.settings import get_settings

from .commands import discover as discover_commands

app = typer.Typer(help="Locate project-scoped directories from a terminal or a GUI launch.")
app.command("resolve")(discover_commands.resolve)
app.command("path")(discover_commands.path)
app.command("exists")(discover_commands.exists)


def _version_callback(value: bool) -> None:
    if value:
        app_info = get_settings().app
        typer.echo(f"{app_info.project_name} {app_info.version}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging() -> None:
    settings = get_settings()
    if settings.logging.enabled:
        setup_cli_logging(app_info=settings.app, config=settings.logging)


def main() -> None:
    """Entrypoint for the wayfinder CLI."""
    _setup_logging()
    app()
