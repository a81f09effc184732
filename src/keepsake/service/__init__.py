"""Save/load orchestration service."""

from .models import IssueHandler, IssueKind, PersistenceIssue, ServiceState
from .service import NEVER_SAVED, PersistenceService

__all__ = [
    "NEVER_SAVED",
    "IssueHandler",
    "IssueKind",
    "PersistenceIssue",
    "PersistenceService",
    "ServiceState",
]
