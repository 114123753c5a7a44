"""Repository gateway: the only component that runs git."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from webgit.core.exceptions import (
    BranchNotFoundError,
    CommitNotFoundError,
    GitCommandError,
    ValidationError,
)
from webgit.core.models import (
    BranchResult,
    BranchSummary,
    CommitDetail,
    CommitRecord,
    CommitResult,
    GitConfigValues,
    OperationResult,
    PullOutcome,
    PullResult,
    RemoteEntry,
    StatusSnapshot,
)
from webgit.git.parsers import (
    LOG_FORMAT,
    REF_FORMAT,
    parse_change_summary,
    parse_commit_output,
    parse_diffstat_files,
    parse_log,
    parse_parents,
    parse_refs,
    parse_remotes,
    parse_status,
)
from webgit.git.runner import GitRunner
from webgit.security.config_policy import ALLOWED_CONFIG_KEYS, check_config_set
from webgit.security.paths import validate_paths
from webgit.security.refs import validate_branch_name, validate_revision

logger = structlog.get_logger(__name__)

DEFAULT_HISTORY_LIMIT = 50
MAX_HISTORY_LIMIT = 1000

CONFIG_DEFAULTS: dict[str, str] = {
    "user.name": "",
    "user.email": "",
    "init.defaultbranch": "main",
}


@runtime_checkable
class RepositoryGateway(Protocol):
    """Fixed set of operations exposed for one repository.

    Reads re-derive everything from the live repository on each call;
    nothing is cached, since other tools can change the repository at any
    time.
    """

    @property
    def repo_path(self) -> Path: ...

    async def get_status(self) -> StatusSnapshot: ...

    async def get_branches(self) -> BranchSummary: ...

    async def create_branch(self, name: str, checkout: bool = False) -> BranchResult: ...

    async def checkout_branch(self, name: str) -> BranchResult: ...

    async def delete_branch(self, name: str) -> BranchResult: ...

    async def get_commit_history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> list[CommitRecord]: ...

    async def get_commit_details(self, commit_hash: str) -> CommitDetail: ...

    async def get_diff(self, path: str | None = None, staged: bool = False) -> str: ...

    async def stage_files(self, paths: Sequence[str] | None = None) -> OperationResult: ...

    async def unstage_files(self, paths: Sequence[str] | None = None) -> OperationResult: ...

    async def commit(self, message: str) -> CommitResult: ...

    async def discard_changes(self, paths: Sequence[str] | None = None) -> OperationResult: ...

    async def get_remotes(self) -> list[RemoteEntry]: ...

    async def fetch(self) -> OperationResult: ...

    async def pull(self, rebase: bool = False) -> PullResult: ...

    async def push(self, force: bool = False, set_upstream: bool = False) -> OperationResult: ...

    async def get_config(self) -> GitConfigValues: ...

    async def set_config(self, key: str, value: str) -> OperationResult: ...


class GitRepositoryGateway:
    """RepositoryGateway backed by the git CLI.

    Every caller-supplied path, branch name, revision and config pair is
    validated before git runs. Git failures propagate as GitCommandError
    with git's own message; nothing is retried or downgraded, except that
    ahead/behind counts fall back to 0 and an unborn HEAD has an empty
    history.
    """

    def __init__(self, runner: GitRunner, default_remote: str = "origin") -> None:
        self._git = runner
        self._default_remote = default_remote

    @classmethod
    def for_path(
        cls,
        repo_path: str | Path,
        git_binary: str = "git",
        timeout: float = 30.0,
        default_remote: str = "origin",
    ) -> "GitRepositoryGateway":
        runner = GitRunner(repo_path, git_binary=git_binary, timeout=timeout)
        return cls(runner, default_remote=default_remote)

    @property
    def repo_path(self) -> Path:
        return self._git.repo_path

    # --- Status ---

    async def get_status(self) -> StatusSnapshot:
        """Current branch, upstream position and changed files."""
        await self._git.run_async("rev-parse", "--is-inside-work-tree")
        result = await self._git.run_async(
            "status", "--porcelain=v1", "--branch", "--untracked-files=all", "-z"
        )
        current, tracking, files = parse_status(result.stdout)

        ahead = behind = 0
        if tracking:
            ahead = await self._count_commits(f"{tracking}..HEAD")
            behind = await self._count_commits(f"HEAD..{tracking}")

        return StatusSnapshot(
            current=current,
            tracking=tracking,
            ahead=ahead,
            behind=behind,
            files=files,
            is_clean=files.is_empty,
        )

    async def _count_commits(self, revision_range: str) -> int:
        # An unknown count (e.g. the upstream ref was deleted) is reported as 0.
        result = await self._git.run_async(
            "rev-list", "--count", revision_range, "--", check=False
        )
        if not result.ok:
            logger.debug("Could not count commits", range=revision_range)
            return 0
        try:
            return int(result.stdout.strip())
        except ValueError:
            return 0

    # --- Branches ---

    async def get_branches(self) -> BranchSummary:
        current = await self._git.run_async("branch", "--show-current")
        refs = await self._git.run_async(
            "for-each-ref", f"--format={REF_FORMAT}", "refs/heads", "refs/remotes"
        )
        local, remote = parse_refs(refs.stdout)
        return BranchSummary(
            current=current.stdout.strip() or None,
            local=local,
            remote=remote,
        )

    async def create_branch(self, name: str, checkout: bool = False) -> BranchResult:
        name = validate_branch_name(name)
        if checkout:
            await self._git.run_async("switch", "-c", name)
        else:
            await self._git.run_async("branch", name)
        logger.info("Branch created", branch=name, checkout=checkout)
        return BranchResult(branch=name)

    async def checkout_branch(self, name: str) -> BranchResult:
        """Switch HEAD to a branch.

        ``git switch`` only moves between branches, so a name that happens
        to match a file can never discard working-tree changes.
        """
        name = validate_branch_name(name)
        try:
            await self._git.run_async("switch", name)
        except GitCommandError as e:
            if "invalid reference" in e.message:
                raise BranchNotFoundError(
                    f"Branch not found: {name}",
                    details={"branch": name},
                ) from e
            raise
        logger.info("Branch checked out", branch=name)
        return BranchResult(branch=name)

    async def delete_branch(self, name: str) -> BranchResult:
        """Delete a local branch; git's refusal for unmerged branches propagates."""
        name = validate_branch_name(name)
        try:
            await self._git.run_async("branch", "-d", name)
        except GitCommandError as e:
            if "not found" in e.message:
                raise BranchNotFoundError(
                    f"Branch not found: {name}",
                    details={"branch": name},
                ) from e
            raise
        logger.info("Branch deleted", branch=name)
        return BranchResult(branch=name)

    # --- History ---

    async def get_commit_history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> list[CommitRecord]:
        """Most recent commits first, at most ``limit`` of them."""
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationError(
                "limit must be a positive integer",
                details={"limit": limit},
            )
        limit = min(limit, MAX_HISTORY_LIMIT)

        if not await self._has_commits():
            return []

        result = await self._git.run_async(
            "log", f"--max-count={limit}", f"--format={LOG_FORMAT}", "HEAD", "--"
        )
        return parse_log(result.stdout)

    async def get_commit_details(self, commit_hash: str) -> CommitDetail:
        """One commit with its diff against the first parent.

        A root commit is diffed against the empty tree.
        """
        revision = validate_revision(commit_hash)
        resolved = await self._git.run_async(
            "rev-parse", "--verify", "--quiet", f"{revision}^{{commit}}",
            check=False,
        )
        full_hash = resolved.stdout.strip()
        if not resolved.ok or not full_hash:
            raise CommitNotFoundError(
                f"Commit not found: {commit_hash}",
                details={"hash": commit_hash},
            )

        log = await self._git.run_async(
            "log", "-1", f"--format={LOG_FORMAT}", full_hash, "--"
        )
        records = parse_log(log.stdout)
        if not records:
            raise CommitNotFoundError(
                f"Commit not found: {commit_hash}",
                details={"hash": commit_hash},
            )
        record = records[0]
        parents = parse_parents(log.stdout)

        base = parents[0] if parents else await self._empty_tree()
        diff = await self._git.run_async("diff", base, full_hash, "--")
        stats = await self._git.run_async(
            "show", "--stat", "--name-status", "--format=medium", full_hash, "--"
        )

        return CommitDetail(
            **record.model_dump(),
            parents=parents,
            diff=diff.stdout,
            stats=stats.stdout,
        )

    async def _has_commits(self) -> bool:
        result = await self._git.run_async(
            "rev-parse", "--verify", "--quiet", "HEAD", check=False
        )
        return result.ok

    async def _empty_tree(self) -> str:
        # Hashing an empty tree respects the repository's object format.
        result = await self._git.run_async(
            "hash-object", "-t", "tree", "--stdin", input=""
        )
        return result.stdout.strip()

    # --- Working tree and index ---

    async def get_diff(self, path: str | None = None, staged: bool = False) -> str:
        args = ["diff"]
        if staged:
            args.append("--cached")
        if path:
            args.extend(["--", *validate_paths(path, self.repo_path)])
        result = await self._git.run_async(*args)
        return result.stdout

    async def stage_files(self, paths: Sequence[str] | None = None) -> OperationResult:
        """Stage the given paths, or every pending change when none are given."""
        targets = validate_paths(paths, self.repo_path) if paths is not None else []
        if targets:
            await self._git.run_async("add", "--", *targets)
        else:
            await self._git.run_async("add", "--all")
        logger.info("Files staged", count=len(targets) or "all")
        return OperationResult()

    async def unstage_files(self, paths: Sequence[str] | None = None) -> OperationResult:
        """Remove the given paths (or everything) from the index."""
        targets = validate_paths(paths, self.repo_path) if paths is not None else []

        if await self._has_commits():
            if targets:
                await self._git.run_async("reset", "-q", "HEAD", "--", *targets)
            else:
                await self._git.run_async("reset", "-q", "HEAD")
        else:
            # No HEAD to reset to: drop the entries from the index instead.
            await self._git.run_async(
                "rm", "--cached", "-r", "-q", "--ignore-unmatch", "--", *(targets or ["."])
            )
        logger.info("Files unstaged", count=len(targets) or "all")
        return OperationResult()

    async def commit(self, message: str) -> CommitResult:
        if not isinstance(message, str) or not message.strip():
            raise ValidationError("Commit message must not be empty")

        result = await self._git.run_async("commit", "-m", message.strip())
        branch, short_hash = parse_commit_output(result.stdout)
        if short_hash is None:
            head = await self._git.run_async("rev-parse", "--short", "HEAD")
            short_hash = head.stdout.strip()

        logger.info("Commit created", commit=short_hash, branch=branch)
        return CommitResult(
            commit=short_hash,
            branch=branch,
            summary=parse_change_summary(result.stdout),
        )

    async def discard_changes(self, paths: Sequence[str] | None = None) -> OperationResult:
        """Revert working-tree changes to the index version.

        Untracked files are left alone.
        """
        targets = validate_paths(paths, self.repo_path) if paths is not None else []
        await self._git.run_async("checkout", "--", *(targets or ["."]))
        logger.info("Changes discarded", count=len(targets) or "all")
        return OperationResult()

    # --- Remotes ---

    async def get_remotes(self) -> list[RemoteEntry]:
        result = await self._git.run_async("remote", "-v")
        return parse_remotes(result.stdout)

    async def fetch(self) -> OperationResult:
        await self._git.run_async("fetch", "--all")
        logger.info("Fetched all remotes")
        return OperationResult()

    async def pull(self, rebase: bool = False) -> PullResult:
        """Integrate upstream changes; conflicts surface as GitCommandError."""
        args = ["pull", "--stat"]
        if rebase:
            args.append("--rebase")
        else:
            args.append("--no-rebase")
        result = await self._git.run_async(*args)
        output = result.stdout
        logger.info("Pulled", rebase=rebase)
        return PullResult(
            result=PullOutcome(
                files=parse_diffstat_files(output),
                summary=parse_change_summary(output),
                output=output.strip(),
            )
        )

    async def push(self, force: bool = False, set_upstream: bool = False) -> OperationResult:
        """Push the current branch.

        With ``set_upstream`` the current branch is read first and then
        pushed with ``-u``; a branch switch between the two calls is not
        guarded against.
        """
        args = ["push"]
        if force:
            args.append("--force")
        if set_upstream:
            current = await self._git.run_async("branch", "--show-current")
            branch = current.stdout.strip()
            if not branch:
                raise ValidationError("Cannot set upstream: HEAD is detached")
            args.extend(["-u", self._default_remote, branch])
        await self._git.run_async(*args)
        logger.info("Pushed", force=force, set_upstream=set_upstream)
        return OperationResult()

    # --- Configuration ---

    async def get_config(self) -> GitConfigValues:
        values = {}
        for key in ALLOWED_CONFIG_KEYS:
            # Exit code 1 means the key is unset.
            result = await self._git.run_async("config", "--get", key, check=False)
            if result.returncode not in (0, 1):
                raise GitRunner.error_for(result)
            values[key] = result.stdout.strip() if result.ok else CONFIG_DEFAULTS[key]

        return GitConfigValues(
            user_name=values["user.name"],
            user_email=values["user.email"],
            default_branch=values["init.defaultbranch"],
        )

    async def set_config(self, key: str, value: str) -> OperationResult:
        key, value = check_config_set(key, value)
        await self._git.run_async("config", key, value)
        logger.info("Config updated", key=key)
        return OperationResult()
