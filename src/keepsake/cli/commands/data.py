from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from keepsake.constants import LAST_SAVE_TIME_KEY
from keepsake.registry import JsonFileRegistry
from keepsake.scheduler import AutoSaveScheduler, ManualTicker
from keepsake.service import NEVER_SAVED, PersistenceService
from keepsake.settings import get_settings

from .options import SettingsFileOption, settings_source

app = typer.Typer(help="Manage stored data.")


@app.callback(invoke_without_command=True)
def _data_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("status")
def status(settings_file: SettingsFileOption = None) -> None:
    """Show where data is stored and whether a save exists."""
    service = _open_service(settings_file)
    backend = service.backend
    keys = [key for key in service.get_all_data() if key != LAST_SAVE_TIME_KEY]
    last_save = service.get_last_save_time()

    typer.echo(f"backend:    {backend.describe() if backend else 'unavailable'}")
    typer.echo(f"exists:     {'yes' if service.save_data_exists() else 'no'}")
    typer.echo(f"keys:       {len(keys)}")
    typer.echo(f"last save:  {'never' if last_save == NEVER_SAVED else last_save.isoformat()}")


@app.command("clear")
def clear(
    settings_file: SettingsFileOption = None,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation.")] = False,
) -> None:
    """Delete all stored data."""
    service = _open_service(settings_file)
    backend = service.backend
    location = backend.describe() if backend else "unavailable"

    if not yes:
        typer.confirm(f"Delete all save data at {location}?", abort=True)

    service.delete_all_data()
    typer.secho(f"Deleted save data at {location}", fg=typer.colors.GREEN)


def _open_service(settings_file: Path | None) -> PersistenceService:
    # Inspection must not flush on a timer, so the ticker is never driven.
    app_settings = get_settings()
    directories = app_settings.to_app_directories()
    service = PersistenceService(
        settings_source(settings_file),
        directories=directories,
        registry=JsonFileRegistry.from_directories(directories, app_settings.paths.registry_filename),
        scheduler_factory=lambda flush, settings: AutoSaveScheduler.from_settings(flush, settings, ManualTicker()),
    )
    service.initialize()
    return service
