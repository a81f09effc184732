"""Storage backend error models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BackendError(BaseModel):
    """Base storage backend error."""

    model_config = ConfigDict(extra="forbid")

    location: str
    message: str


class BackendReadError(BackendError):
    """Error reading the stored blob."""


class BackendWriteError(BackendError):
    """Error writing or deleting the stored blob."""
