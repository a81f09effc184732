"""Common models and types used across Keepsake modules."""

from keepsake.utils.directories import AppDirectories
from keepsake.utils.types import JsonDict, JsonValue, NonEmptyString

from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo, AppPaths
from .paths import get_data_directory_from_dirs, get_global_config_root

__all__ = [
    "AppDirectories",
    "AppInfo",
    "AppPaths",
    "JsonDict",
    "JsonValue",
    "LoggingConfig",
    "NonEmptyString",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory_from_dirs",
    "get_global_config_root",
    "setup_cli_logging",
]
