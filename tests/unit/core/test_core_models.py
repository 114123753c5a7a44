"""Tests for domain models and exceptions."""

import pytest

from webgit.core.exceptions import (
    BranchNotFoundError,
    CommitNotFoundError,
    GitCommandError,
    GitTimeoutError,
    NotFoundError,
    PathViolationError,
    PolicyViolationError,
    ValidationError,
    WebGitError,
)
from webgit.core.models import (
    CommitDetail,
    CommitResult,
    FileChanges,
    GitConfigValues,
    RenamedFile,
    StatusSnapshot,
)

from factories import CommitRecordFactory


@pytest.mark.unit
class TestModels:
    """Tests for the response models."""

    def test_file_changes_is_empty(self) -> None:
        assert FileChanges().is_empty
        assert not FileChanges(untracked=["a.txt"]).is_empty
        assert not FileChanges(renamed=[RenamedFile(from_path="a", to_path="b")]).is_empty

    def test_status_snapshot_defaults(self) -> None:
        snapshot = StatusSnapshot()
        assert snapshot.current is None
        assert snapshot.tracking is None
        assert (snapshot.ahead, snapshot.behind) == (0, 0)
        assert snapshot.is_clean is True

    def test_status_serializes_camel_case(self) -> None:
        data = StatusSnapshot(current="main", is_clean=False).model_dump(by_alias=True)
        assert "isClean" in data
        assert "is_clean" not in data

    def test_renamed_file_aliases(self) -> None:
        renamed = RenamedFile.model_validate({"from": "old.txt", "to": "new.txt"})
        assert renamed.from_path == "old.txt"
        assert renamed.model_dump(by_alias=True) == {"from": "old.txt", "to": "new.txt"}

    def test_commit_detail_extends_record(self) -> None:
        record = CommitRecordFactory()
        detail = CommitDetail(**record.model_dump(), parents=["p" * 40], diff="+x")
        data = detail.model_dump(by_alias=True)
        assert data["shortHash"] == record.short_hash
        assert data["parents"] == ["p" * 40]
        assert data["stats"] == ""

    def test_commit_result_defaults(self) -> None:
        result = CommitResult(commit="abc1234")
        assert result.success is True
        assert result.branch is None
        assert result.summary.changes == 0

    def test_config_defaults(self) -> None:
        assert GitConfigValues().model_dump(by_alias=True) == {
            "userName": "",
            "userEmail": "",
            "defaultBranch": "main",
        }


@pytest.mark.unit
class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self) -> None:
        assert issubclass(PathViolationError, ValidationError)
        assert issubclass(PolicyViolationError, ValidationError)
        assert issubclass(CommitNotFoundError, NotFoundError)
        assert issubclass(BranchNotFoundError, NotFoundError)
        assert issubclass(GitTimeoutError, GitCommandError)
        assert issubclass(GitCommandError, WebGitError)

    def test_details_default_to_empty(self) -> None:
        error = WebGitError("boom")
        assert error.message == "boom"
        assert error.details == {}
        assert str(error) == "boom"

    def test_git_command_error_details(self) -> None:
        error = GitCommandError(
            "error: failed to push",
            command=["push"],
            returncode=1,
            stderr="error: failed to push\n",
        )
        assert error.details == {"command": ["push"], "returncode": 1, "retryable": False}
        assert error.stderr == "error: failed to push\n"

    def test_git_command_error_keeps_given_details(self) -> None:
        error = GitCommandError("x", details={"branch": "main"}, retryable=True)
        assert error.details == {"branch": "main", "retryable": True}
        assert error.command == []
