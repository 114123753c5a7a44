"""Pytest configuration and fixtures."""

import subprocess
from collections.abc import Sequence
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from webgit.api.main import create_app
from webgit.config import Settings
from webgit.core.exceptions import CommitNotFoundError
from webgit.core.models import (
    BranchResult,
    BranchSummary,
    CommitDetail,
    CommitRecord,
    CommitResult,
    GitConfigValues,
    OperationResult,
    PullResult,
    RemoteEntry,
    StatusSnapshot,
)
from webgit.git.gateway import GitRepositoryGateway
from webgit.security.config_policy import check_config_set
from webgit.security.paths import validate_paths
from webgit.security.session import SessionGuard

from factories import CommitRecordFactory, RemoteEntryFactory, StatusSnapshotFactory

TEST_TOKEN = "test-session-token-0123456789abcdef0123456789abcdef"


def git(repo_path: Path, *args: str) -> str:
    """Run a git command in a test repository."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def init_repo(repo_path: Path) -> Path:
    repo_path.mkdir(parents=True, exist_ok=True)
    git(repo_path, "init", "--initial-branch=main")
    git(repo_path, "config", "user.email", "test@test.com")
    git(repo_path, "config", "user.name", "Test")
    git(repo_path, "config", "commit.gpgsign", "false")
    return repo_path


@pytest.fixture(autouse=True)
def isolated_git_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's global and system git config out of the tests."""
    global_config = tmp_path / "gitconfig"
    global_config.write_text("")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")


@pytest.fixture
def empty_repo(tmp_path: Path) -> Path:
    """A freshly initialized repository with no commits."""
    return init_repo(tmp_path / "empty-repo")


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository with one commit."""
    repo_path = init_repo(tmp_path / "test-repo")

    (repo_path / "docs").mkdir()
    (repo_path / "docs" / "guide.md").write_text("# Guide\n\nContent here.\n")
    (repo_path / "README.md").write_text("# Test Repo\n\nA test repository.\n")

    git(repo_path, "add", ".")
    git(repo_path, "commit", "-m", "Initial commit")
    return repo_path


@pytest.fixture
def repo_with_remote(tmp_path: Path, git_repo: Path) -> Path:
    """A repository whose main branch tracks a bare ``origin``."""
    origin = tmp_path / "origin.git"
    subprocess.run(
        ["git", "init", "--bare", "--initial-branch=main", str(origin)],
        capture_output=True,
        check=True,
    )
    git(git_repo, "remote", "add", "origin", str(origin))
    git(git_repo, "push", "-u", "origin", "main")
    return git_repo


@pytest.fixture
def gateway(git_repo: Path) -> GitRepositoryGateway:
    return GitRepositoryGateway.for_path(git_repo, timeout=30.0)


@pytest.fixture
def empty_gateway(empty_repo: Path) -> GitRepositoryGateway:
    return GitRepositoryGateway.for_path(empty_repo, timeout=30.0)


class FakeGateway:
    """In-memory RepositoryGateway that records calls."""

    def __init__(self, repo_path: Path) -> None:
        self._repo_path = repo_path
        self.calls: list[tuple] = []
        self.status = StatusSnapshotFactory()
        self.commits = CommitRecordFactory.build_batch(3)
        self.remotes = [RemoteEntryFactory(name="origin")]
        self.config = GitConfigValues(user_name="Test", user_email="test@test.com")

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    async def get_status(self) -> StatusSnapshot:
        self.calls.append(("get_status",))
        return self.status

    async def get_branches(self) -> BranchSummary:
        self.calls.append(("get_branches",))
        return BranchSummary(current="main", local=["main", "feature"], remote=["origin/main"])

    async def create_branch(self, name: str, checkout: bool = False) -> BranchResult:
        self.calls.append(("create_branch", name, checkout))
        return BranchResult(branch=name)

    async def checkout_branch(self, name: str) -> BranchResult:
        self.calls.append(("checkout_branch", name))
        return BranchResult(branch=name)

    async def delete_branch(self, name: str) -> BranchResult:
        self.calls.append(("delete_branch", name))
        return BranchResult(branch=name)

    async def get_commit_history(self, limit: int = 50) -> list[CommitRecord]:
        self.calls.append(("get_commit_history", limit))
        return self.commits[:limit]

    async def get_commit_details(self, commit_hash: str) -> CommitDetail:
        self.calls.append(("get_commit_details", commit_hash))
        for record in self.commits:
            if record.hash.startswith(commit_hash):
                return CommitDetail(**record.model_dump(), diff="diff --git a/x b/x\n")
        raise CommitNotFoundError(f"Commit not found: {commit_hash}")

    async def get_diff(self, path: str | None = None, staged: bool = False) -> str:
        if path is not None:
            validate_paths(path, self._repo_path)
        self.calls.append(("get_diff", path, staged))
        return "diff --git a/README.md b/README.md\n"

    async def stage_files(self, paths: Sequence[str] | None = None) -> OperationResult:
        if paths is not None:
            validate_paths(paths, self._repo_path)
        self.calls.append(("stage_files", paths))
        return OperationResult()

    async def unstage_files(self, paths: Sequence[str] | None = None) -> OperationResult:
        if paths is not None:
            validate_paths(paths, self._repo_path)
        self.calls.append(("unstage_files", paths))
        return OperationResult()

    async def commit(self, message: str) -> CommitResult:
        self.calls.append(("commit", message))
        return CommitResult(commit="abc1234", branch="main")

    async def discard_changes(self, paths: Sequence[str] | None = None) -> OperationResult:
        if paths is not None:
            validate_paths(paths, self._repo_path)
        self.calls.append(("discard_changes", paths))
        return OperationResult()

    async def get_remotes(self) -> list[RemoteEntry]:
        self.calls.append(("get_remotes",))
        return self.remotes

    async def fetch(self) -> OperationResult:
        self.calls.append(("fetch",))
        return OperationResult()

    async def pull(self, rebase: bool = False) -> PullResult:
        self.calls.append(("pull", rebase))
        return PullResult()

    async def push(self, force: bool = False, set_upstream: bool = False) -> OperationResult:
        self.calls.append(("push", force, set_upstream))
        return OperationResult()

    async def get_config(self) -> GitConfigValues:
        self.calls.append(("get_config",))
        return self.config

    async def set_config(self, key: str, value: str) -> OperationResult:
        key, value = check_config_set(key, value)
        self.calls.append(("set_config", key, value))
        return OperationResult()


@pytest.fixture
def fake_gateway(tmp_path: Path) -> FakeGateway:
    return FakeGateway(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(repo_path=str(tmp_path), environment="test")


@pytest.fixture
def client(settings: Settings, fake_gateway: FakeGateway) -> TestClient:
    """TestClient over the app with a fake gateway and a known token."""
    app = create_app(
        settings=settings,
        gateway=fake_gateway,
        session_guard=SessionGuard(TEST_TOKEN),
    )
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-CSRF-Token": TEST_TOKEN}
