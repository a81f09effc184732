from __future__ import annotations

import os
from typing import Annotated

import typer

from keepsake.common import create_logger, setup_cli_logging
from keepsake.settings import get_settings

from .commands import data as data_commands
from .commands import settings as settings_commands

logger = create_logger("cli")

app = typer.Typer(help="Inspect and manage Keepsake save data.", no_args_is_help=True)
app.add_typer(settings_commands.app, name="settings")
app.add_typer(data_commands.app, name="data")


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"{get_settings().app.project_name} {get_settings().app.version}")
        raise typer.Exit()


@app.callback()
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_print_version, is_eager=True, help="Print the version and exit."),
    ] = False,
) -> None:
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False


def _setup_logging() -> None:
    app_settings = get_settings()
    if not app_settings.logging.enabled:
        return

    setup_cli_logging(
        app_info=app_settings.app,
        config=app_settings.logging,
        directories=app_settings.to_app_directories(),
    )
    logger.debug("CLI logging initialized", config=app_settings.logging.model_dump())


def main() -> None:
    """Entrypoint for the keepsake CLI."""
    _setup_logging()
    app()
