"""Exception hierarchy for WebGit."""

from typing import Any


class WebGitError(Exception):
    """Base exception for all WebGit errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(WebGitError):
    """Invalid startup configuration (repository directory, port)."""


class ValidationError(WebGitError):
    """Caller input rejected before any git command runs."""


class PathViolationError(ValidationError):
    """A caller-supplied path escapes or could escape the repository root."""


class PolicyViolationError(ValidationError):
    """A configuration key/value pair is not permitted."""


class ForbiddenError(WebGitError):
    """Missing or incorrect session token on a state-changing request."""


class NotFoundError(WebGitError):
    """The requested commit or branch does not exist."""


class CommitNotFoundError(NotFoundError):
    """Revision does not resolve to a commit."""


class BranchNotFoundError(NotFoundError):
    """Branch does not exist."""


class GitCommandError(WebGitError):
    """A git command exited with a failure.

    The git output is kept verbatim so conflicts, non-fast-forward
    rejections and lock contention reach the caller unchanged.
    """

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
        retryable: bool = False,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = dict(details or {})
        if command is not None:
            details.setdefault("command", command)
        if returncode is not None:
            details.setdefault("returncode", returncode)
        details.setdefault("retryable", retryable)
        super().__init__(message, details=details)
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr
        self.retryable = retryable


class NotARepositoryError(GitCommandError):
    """The configured directory is not a git working tree."""


class GitTimeoutError(GitCommandError):
    """A git command did not finish within the configured timeout."""
