"""Git command execution using subprocess."""

import asyncio
import os
import subprocess
from dataclasses import dataclass
from functools import partial
from pathlib import Path

import structlog

from webgit.core.exceptions import GitCommandError, GitTimeoutError, NotARepositoryError

logger = structlog.get_logger(__name__)

# stderr fragments git prints when another process holds a lock file.
_LOCK_MARKERS = (
    "index.lock",
    ".lock': File exists",
    "Unable to create",
    "cannot lock ref",
)


@dataclass
class GitResult:
    """Output of a finished git command."""

    args: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class GitRunner:
    """Runs git commands inside one repository.

    Uses subprocess + git CLI directly (no gitpython dependency). Every
    command is bounded by ``timeout`` so a command stuck behind another
    process's lock fails instead of hanging the request.
    """

    def __init__(
        self,
        repo_path: str | Path,
        git_binary: str = "git",
        timeout: float = 30.0,
    ) -> None:
        self._repo_path = Path(repo_path)
        self._git_binary = git_binary
        self._timeout = timeout
        self._env = self._build_env()

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    @staticmethod
    def _build_env() -> dict[str, str]:
        env = dict(os.environ)
        # Credential prompts would block forever without a terminal.
        env["GIT_TERMINAL_PROMPT"] = "0"
        # Read-only commands such as status must not take the index lock.
        env["GIT_OPTIONAL_LOCKS"] = "0"
        # Stable, untranslated messages for error classification.
        env["LC_ALL"] = "C"
        # Caller paths are file names, never glob or :(magic) pathspecs.
        env["GIT_LITERAL_PATHSPECS"] = "1"
        return env

    def run(self, *args: str, input: str | None = None, check: bool = True) -> GitResult:
        """Run a git command and return its output.

        Raises GitCommandError when ``check`` is set and git exits non-zero.
        """
        command = [self._git_binary, *args]
        logger.debug("Running git command", subcommand=args[0] if args else None)
        try:
            completed = subprocess.run(
                command,
                cwd=self._repo_path,
                input=input,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=self._env,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise GitTimeoutError(
                f"git {args[0]} timed out after {self._timeout:g}s",
                command=list(args),
                retryable=True,
            ) from e
        except FileNotFoundError as e:
            raise GitCommandError(
                f"git executable not found: {self._git_binary}",
                command=list(args),
            ) from e

        result = GitResult(
            args=list(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
        if check and not result.ok:
            raise self.error_for(result)
        return result

    async def run_async(
        self, *args: str, input: str | None = None, check: bool = True
    ) -> GitResult:
        """Run a git command in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, partial(self.run, *args, input=input, check=check)
        )

    @staticmethod
    def error_for(result: GitResult) -> GitCommandError:
        """Build the exception for a failed command, keeping git's output."""
        output = result.stderr.strip() or result.stdout.strip()
        message = output or f"git {result.args[0]} failed with exit code {result.returncode}"

        if "not a git repository" in output.lower():
            return NotARepositoryError(
                message,
                command=result.args,
                returncode=result.returncode,
                stderr=result.stderr,
            )

        retryable = any(marker in output for marker in _LOCK_MARKERS)
        if retryable:
            logger.warning("git lock contention", subcommand=result.args[0])

        return GitCommandError(
            message,
            command=result.args,
            returncode=result.returncode,
            stderr=result.stderr,
            retryable=retryable,
        )
