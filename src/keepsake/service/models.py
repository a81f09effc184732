"""Service state and issue reporting models."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict


class ServiceState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    DISPOSING = "disposing"


class IssueKind(str, Enum):
    """Category of a persistence failure that was absorbed instead of raised."""

    NOT_INITIALIZED = "not_initialized"
    BACKEND_READ = "backend_read"
    BACKEND_WRITE = "backend_write"
    DECODE = "decode"
    ENCODE = "encode"
    CONVERSION = "conversion"
    SETTINGS_MISSING = "settings_missing"
    SETTINGS_INVALID = "settings_invalid"
    COMPONENT = "component"


class PersistenceIssue(BaseModel):
    """A failure the service logged and recovered from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: IssueKind
    message: str
    key: str | None = None


type IssueHandler = Callable[[PersistenceIssue], None]

ISSUE_LOG_LEVELS: dict[IssueKind, str] = {
    IssueKind.NOT_INITIALIZED: "WARNING",
    IssueKind.CONVERSION: "WARNING",
    IssueKind.SETTINGS_MISSING: "WARNING",
}
