from __future__ import annotations

import json
from typing import Annotated, Literal

import typer
import yaml
from result import Err, Ok

from keepsake.config import (
    PersistenceSettings,
    SettingsError,
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
    SettingsYamlError,
)

from .options import SettingsFileOption, settings_source

OutputFormat = Annotated[
    Literal["yaml", "json"],
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]

app = typer.Typer(help="Inspect persistence settings.")


@app.callback(invoke_without_command=True)
def _settings_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show(
    settings_file: SettingsFileOption = None,
    format: OutputFormat = "yaml",
) -> None:
    """Print the effective settings, falling back to defaults when no file exists."""
    match settings_source(settings_file).load():
        case Ok(settings):
            pass
        case Err(SettingsNotFoundError() as missing):
            typer.secho(f"{missing.message}; showing defaults.", err=True, fg=typer.colors.YELLOW)
            settings = PersistenceSettings()
        case Err(error):
            typer.secho(_describe(error), err=True, fg=typer.colors.RED)
            raise typer.Exit(code=1)

    typer.echo(_render(settings, format.lower()))


def _render(settings: PersistenceSettings, output_format: str) -> str:
    payload = settings.model_dump(mode="json")
    if output_format == "json":
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)


def _describe(error: SettingsError) -> str:
    match error:
        case SettingsYamlError(line=int(line)):
            return f"{error.path}:{line}: {error.message}"
        case SettingsValidationError(field=str(field), path=path):
            return f"{field}: {error.message}" + (f" ({path})" if path else "")
        case SettingsIOError() | SettingsYamlError():
            return f"{error.message} ({error.path})"
        case _:
            return error.message
