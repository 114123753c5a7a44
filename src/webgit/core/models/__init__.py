"""Domain models for WebGit."""

from webgit.core.models.branch import BranchSummary
from webgit.core.models.commit import CommitDetail, CommitRecord
from webgit.core.models.config import GitConfigValues
from webgit.core.models.remote import RemoteEntry
from webgit.core.models.results import (
    BranchResult,
    ChangeSummary,
    CommitResult,
    OperationResult,
    PullOutcome,
    PullResult,
)
from webgit.core.models.status import FileChanges, RenamedFile, StatusSnapshot

__all__ = [
    "StatusSnapshot",
    "FileChanges",
    "RenamedFile",
    "CommitRecord",
    "CommitDetail",
    "BranchSummary",
    "RemoteEntry",
    "GitConfigValues",
    "OperationResult",
    "BranchResult",
    "ChangeSummary",
    "CommitResult",
    "PullOutcome",
    "PullResult",
]
