"""Application identity and file naming shared by the CLI and the library."""

from typing import Literal

from pydantic import BaseModel

from keepsake.constants import APP_NAME, DEFAULT_REGISTRY_FILENAME, DEFAULT_SETTINGS_FILENAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class AppPaths(BaseModel):
    """Folder and file names under the XDG roots, overridable via ``KEEPSAKE_PATHS__*``."""

    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
    settings_filename: str = DEFAULT_SETTINGS_FILENAME
    registry_filename: str = DEFAULT_REGISTRY_FILENAME
