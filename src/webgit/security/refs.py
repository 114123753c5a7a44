"""Checks for branch names and revisions passed to git as arguments.

A value starting with ``-`` would be parsed by git as an option, so these
checks run before any such value reaches the command line.
"""

import re

from webgit.core.exceptions import ValidationError

# Characters git forbids anywhere in a ref name (see git-check-ref-format).
_FORBIDDEN_REF_CHARS = re.compile(r"[\x00-\x20\x7f~^:?*\[\\]")
_REVISION_CHARS = re.compile(r"^[^\x00-\x20\x7f]+$")

MAX_REVISION_LENGTH = 256


def validate_branch_name(name: object) -> str:
    """Validate a branch name against git's ref-format rules."""
    if not isinstance(name, str) or not name:
        raise ValidationError("Branch name must be a non-empty string")

    reason = _branch_name_problem(name)
    if reason:
        raise ValidationError(
            f"Invalid branch name '{name}': {reason}",
            details={"branch": name},
        )
    return name


def _branch_name_problem(name: str) -> str | None:
    if name.startswith("-"):
        return "must not start with '-'"
    if name == "HEAD" or name == "@":
        return "reserved name"
    if _FORBIDDEN_REF_CHARS.search(name):
        return "contains a forbidden character"
    if ".." in name or "@{" in name or "//" in name:
        return "contains a forbidden sequence"
    if name.startswith("/") or name.endswith("/") or name.endswith("."):
        return "must not start or end with '/' or end with '.'"
    for component in name.split("/"):
        if component.startswith(".") or component.endswith(".lock"):
            return "path component must not start with '.' or end with '.lock'"
    return None


def validate_revision(revision: object) -> str:
    """Validate a commit identifier (hash, ref or revision expression)."""
    if not isinstance(revision, str) or not revision:
        raise ValidationError("Commit identifier must be a non-empty string")
    if revision.startswith("-"):
        raise ValidationError(
            f"Invalid commit identifier: {revision}",
            details={"hash": revision},
        )
    if len(revision) > MAX_REVISION_LENGTH or not _REVISION_CHARS.match(revision):
        raise ValidationError(
            f"Invalid commit identifier: {revision}",
            details={"hash": revision[:MAX_REVISION_LENGTH]},
        )
    return revision
