"""Loguru setup for Keepsake.

Two entry points share one sink format:
- The CLI logs to a rotating file under the data directory.
- Embedding hosts get nothing by default (the library is disabled at import)
  and opt in with ``keepsake.enable_logging``, optionally passing their own sink.
"""

import sys
from pathlib import Path
from typing import Any, Literal, TextIO

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from keepsake.constants import APP_NAME
from keepsake.utils.directories import AppDirectories

from .models import AppInfo
from .paths import get_data_directory_from_dirs

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

_TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[scope]: <16} | {message} | {extra}\n{exception}"


class LoggingConfig(BaseModel):
    """CLI logging options, read from ``KEEPSAKE_LOGGING__*``."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: LogLevel = Field(default="INFO")
    log_file: str | None = Field(default=None, description="Defaults to <data dir>/logs/keepsake.log.")
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, directories: AppDirectories) -> int:
    """Route all Keepsake records to a rotating log file. Returns the loguru handler id."""
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    log_file = Path(config.log_file).expanduser() if config.log_file else default_log_file(directories)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    sink_options: dict[str, Any] = {
        "level": config.log_level,
        "rotation": config.rotation,
        "retention": config.retention,
        "diagnose": app_info.environment == "dev",
    }
    if config.format == "json":
        sink_options["serialize"] = True
    else:
        sink_options["format"] = _TEXT_FORMAT

    handler_id = logger.add(log_file, **sink_options)
    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level, format=config.format)
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: LogLevel = "INFO", sink: TextIO | None = None) -> int:
    """Turn on Keepsake records for an embedding host.

    Only records emitted by Keepsake reach the new sink, so the host's own
    loguru handlers are left untouched.
    """
    logger.enable(APP_NAME)
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=_TEXT_FORMAT,
        filter=APP_NAME,
        colorize=False,
    )


def create_logger(scope: str) -> "loguru.Logger":
    """Logger tagged with the emitting subsystem (``service``, ``backend.file``, ...)."""
    return logger.bind(scope=scope)


def default_log_file(directories: AppDirectories) -> Path:
    return get_data_directory_from_dirs(directories) / "logs" / f"{APP_NAME}.log"
