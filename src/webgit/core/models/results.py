"""Results of state-changing operations."""

from pydantic import Field

from webgit.core.models.base import ApiModel


class OperationResult(ApiModel):
    success: bool = True


class BranchResult(OperationResult):
    branch: str


class ChangeSummary(ApiModel):
    """Counts parsed from git's shortstat line."""

    changes: int = 0
    insertions: int = 0
    deletions: int = 0


class CommitResult(OperationResult):
    commit: str
    branch: str | None = None
    summary: ChangeSummary = Field(default_factory=ChangeSummary)


class PullOutcome(ApiModel):
    """What a pull brought in."""

    files: list[str] = Field(default_factory=list)
    summary: ChangeSummary = Field(default_factory=ChangeSummary)
    output: str = ""


class PullResult(OperationResult):
    result: PullOutcome = Field(default_factory=PullOutcome)
