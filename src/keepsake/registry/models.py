"""Host registry error models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RegistryError(BaseModel):
    """Base host registry error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class RegistryReadError(RegistryError):
    """Error reading from the host registry."""

    slot: str


class RegistryWriteError(RegistryError):
    """Error writing to the host registry."""

    slot: str
