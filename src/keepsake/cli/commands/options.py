from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from keepsake.config import YamlSettingsSource
from keepsake.settings import get_settings

SettingsFileOption = Annotated[
    Path | None,
    typer.Option(
        "--settings",
        "-s",
        help="Settings file to use. Defaults to ~/.config/keepsake/settings.yaml.",
    ),
]


def settings_source(settings_file: Path | None) -> YamlSettingsSource:
    return YamlSettingsSource(settings_file or get_settings().default_settings_file())
