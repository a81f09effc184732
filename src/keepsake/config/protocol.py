"""Settings source protocol."""

from typing import Protocol

from result import Result

from .models import PersistenceSettings, SettingsError


class SettingsSource(Protocol):
    """Host-provided origin of persistence settings."""

    def load(self) -> Result[PersistenceSettings, SettingsError]:
        """Load and validate settings.

        Returns:
            Ok(PersistenceSettings) when settings were found and are valid.
            Err(SettingsNotFoundError) when the source has no settings.
            Err(SettingsError) on any other loading or validation error.
        """
        ...
