"""Core domain models and exceptions for WebGit."""

from webgit.core.exceptions import (
    BranchNotFoundError,
    CommitNotFoundError,
    ConfigurationError,
    ForbiddenError,
    GitCommandError,
    GitTimeoutError,
    NotARepositoryError,
    NotFoundError,
    PathViolationError,
    PolicyViolationError,
    ValidationError,
    WebGitError,
)
from webgit.core.models import (
    BranchResult,
    BranchSummary,
    ChangeSummary,
    CommitDetail,
    CommitRecord,
    CommitResult,
    FileChanges,
    GitConfigValues,
    OperationResult,
    PullOutcome,
    PullResult,
    RemoteEntry,
    RenamedFile,
    StatusSnapshot,
)

__all__ = [
    # Models
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
    # Exceptions
    "WebGitError",
    "ConfigurationError",
    "ValidationError",
    "PathViolationError",
    "PolicyViolationError",
    "ForbiddenError",
    "NotFoundError",
    "CommitNotFoundError",
    "BranchNotFoundError",
    "GitCommandError",
    "NotARepositoryError",
    "GitTimeoutError",
]
