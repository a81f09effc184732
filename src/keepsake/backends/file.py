"""File-based storage backend."""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result

from keepsake.common import AppDirectories, create_logger, get_data_directory_from_dirs
from keepsake.config import PersistenceSettings

from .models import BackendError, BackendReadError, BackendWriteError
from .protocol import StorageBackend

logger = create_logger("backend.file")


class FileBackend(StorageBackend):
    """Stores the blob in exactly one file.

    Writes overwrite the whole file. A crash in the middle of a write can leave
    a truncated file behind; the next load then reports a decode failure and
    starts fresh.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @classmethod
    def from_settings(cls, settings: PersistenceSettings, directories: AppDirectories) -> FileBackend:
        data_dir = get_data_directory_from_dirs(directories)
        folder = data_dir / settings.folder_name if settings.folder_name else data_dir
        return cls(folder / settings.file_name)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, blob: str) -> Result[None, BackendError]:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(blob, encoding="utf-8")
        except OSError as e:
            return Err(BackendWriteError(location=self.describe(), message=f"Failed to write save file: {e}"))

        logger.debug("Data written", path=str(self._path))
        return Ok(None)

    def read(self) -> Result[str | None, BackendError]:
        if not self._path.exists():
            return Ok(None)

        try:
            blob = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return Err(BackendReadError(location=self.describe(), message=f"Failed to read save file: {e}"))

        logger.debug("Data read", path=str(self._path))
        return Ok(blob)

    def delete(self) -> Result[None, BackendError]:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            return Err(BackendWriteError(location=self.describe(), message=f"Failed to delete save file: {e}"))
        return Ok(None)

    def exists(self) -> bool:
        return self._path.is_file()

    def describe(self) -> str:
        return f"file:{self._path}"
