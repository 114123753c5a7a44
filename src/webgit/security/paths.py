"""Path validation against the repository root."""

import os
import posixpath
from collections.abc import Sequence
from pathlib import Path, PureWindowsPath

from webgit.core.exceptions import ConfigurationError, PathViolationError


def validate_paths(paths: str | Sequence[str], repo_root: str | Path) -> list[str]:
    """Validate caller-supplied paths and return their normalized forms.

    Every path must stay inside ``repo_root``. One bad element rejects the
    whole batch, so callers can validate before running any git command.
    Backslashes count as separators, so ``..\\x`` is treated like ``../x``.
    """
    if isinstance(paths, str):
        items: list = [paths]
    elif isinstance(paths, (list, tuple)):
        items = list(paths)
    else:
        raise PathViolationError(
            "Paths must be a string or a list of strings",
            details={"type": type(paths).__name__},
        )

    root = os.path.realpath(str(repo_root))
    return [_validate_path(item, root) for item in items]


def _validate_path(path: object, root: str) -> str:
    if not isinstance(path, str):
        raise PathViolationError(
            "Path must be a string",
            details={"type": type(path).__name__},
        )
    if not path or "\x00" in path:
        raise PathViolationError("Path must be a non-empty string", details={"path": path})

    normalized = posixpath.normpath(path.replace("\\", "/"))

    windows = PureWindowsPath(path)
    if posixpath.isabs(normalized) or windows.is_absolute() or windows.drive:
        raise PathViolationError(
            f"Absolute paths are not allowed: {path}",
            details={"path": path},
        )

    if ".." in normalized.split("/"):
        raise PathViolationError(
            f"Path traversal is not allowed: {path}",
            details={"path": path},
        )

    # Resolving follows symlinks, so a link pointing outside the root is caught here.
    resolved = os.path.realpath(os.path.join(root, normalized))
    try:
        relative = os.path.relpath(resolved, root)
    except ValueError:
        raise PathViolationError(
            f"Path resolves outside the repository: {path}",
            details={"path": path},
        ) from None
    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        raise PathViolationError(
            f"Path resolves outside the repository: {path}",
            details={"path": path},
        )

    return normalized


def resolve_repository_root(path: str | Path) -> Path:
    """Resolve and check the repository directory given at startup.

    The directory must exist and hold a ``.git`` entry (a directory, or a
    file for linked worktrees).
    """
    root = Path(path).expanduser().resolve()
    if not root.exists():
        raise ConfigurationError(
            f"Directory does not exist: {root}",
            details={"path": str(root)},
        )
    if not root.is_dir():
        raise ConfigurationError(
            f"Not a directory: {root}",
            details={"path": str(root)},
        )
    if not (root / ".git").exists():
        raise ConfigurationError(
            f"Not a git repository: {root}",
            details={"path": str(root)},
        )
    return root
