"""Parsers for git command output."""

import re

from webgit.core.models import (
    ChangeSummary,
    CommitRecord,
    FileChanges,
    RemoteEntry,
    RenamedFile,
)

FIELD_SEP = "\x1f"
RECORD_SEP = "\x1e"

# One record per commit; git expands %x1f and %x1e to the separators above.
LOG_FORMAT = "%x1f".join(["%H", "%s", "%b", "%an", "%ae", "%aI", "%D", "%P"]) + "%x1e"

REF_FORMAT = "%(refname)%00%(refname:short)%00%(symref)"

SHORT_HASH_LENGTH = 7

_CONFLICT_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})

_BRANCH_HEADER = re.compile(
    r"^(?:No commits yet on |Initial commit on )?"
    r"(?P<branch>.+?)"
    r"(?:\.\.\.(?P<tracking>\S+))?"
    r"(?: \[(?P<info>[^\]]*)\])?$"
)
_SHORTSTAT = re.compile(
    r"(?P<changes>\d+) files? changed"
    r"(?:, (?P<insertions>\d+) insertions?\(\+\))?"
    r"(?:, (?P<deletions>\d+) deletions?\(-\))?"
)
_COMMIT_HEADER = re.compile(
    r"^\[(?P<branch>.+?)(?: \(root-commit\))? (?P<hash>[0-9a-f]{4,})\]",
    re.MULTILINE,
)
_DIFFSTAT_LINE = re.compile(r"^\s(?P<path>\S.*?)\s+\|\s+(?:\d+|Bin)", re.MULTILINE)


def parse_status(output: str) -> tuple[str | None, str | None, FileChanges]:
    """Parse ``git status --porcelain=v1 --branch -z``.

    Returns (current branch, tracking ref, categorized files). The branch
    is None for a detached HEAD.
    """
    current: str | None = None
    tracking: str | None = None
    files = FileChanges()

    entries = output.split("\0")
    index = 0
    while index < len(entries):
        entry = entries[index]
        index += 1
        if not entry:
            continue

        if entry.startswith("## "):
            current, tracking = _parse_branch_header(entry[3:])
            continue

        code, path = entry[:2], entry[3:]
        x, y = code[0], code[1]

        if x in "RC" or y in "RC":
            # -z puts the source path of a rename/copy in the next entry.
            original = entries[index] if index < len(entries) else ""
            index += 1
        else:
            original = ""

        if code == "??":
            files.untracked.append(path)
            continue
        if code == "!!":
            continue
        if code in _CONFLICT_CODES:
            files.conflicted.append(path)
            continue

        if x == "R" or y == "R":
            files.renamed.append(RenamedFile(from_path=original, to_path=path))
        if x == "A" or y == "A" or x == "C":
            files.added.append(path)
        if x == "M" or y == "M":
            files.modified.append(path)
        if x == "D" or y == "D":
            files.deleted.append(path)
        if x not in " ?":
            files.staged.append(path)

    return current, tracking, files


def _parse_branch_header(header: str) -> tuple[str | None, str | None]:
    if header.startswith("HEAD (no branch)"):
        return None, None
    match = _BRANCH_HEADER.match(header)
    if not match:
        return header, None
    return match.group("branch"), match.group("tracking")


def parse_log(output: str) -> list[CommitRecord]:
    """Parse ``git log`` output produced with LOG_FORMAT."""
    commits = []
    for record in output.split(RECORD_SEP):
        record = record.lstrip("\n")
        if not record:
            continue
        fields = record.split(FIELD_SEP)
        if len(fields) < 8:
            continue
        full_hash, subject, body, author, email, date, refs, _parents = fields[:8]
        commits.append(
            CommitRecord(
                hash=full_hash,
                short_hash=full_hash[:SHORT_HASH_LENGTH],
                message=subject,
                body=body.strip(),
                author=author,
                email=email,
                date=date,
                refs=refs,
            )
        )
    return commits


def parse_parents(output: str) -> list[str]:
    """Return the parent hashes from a single LOG_FORMAT record."""
    record = output.split(RECORD_SEP)[0].lstrip("\n")
    fields = record.split(FIELD_SEP)
    if len(fields) < 8:
        return []
    return fields[7].split()


def parse_refs(output: str) -> tuple[list[str], list[str]]:
    """Parse ``git for-each-ref --format=REF_FORMAT refs/heads refs/remotes``.

    Symbolic refs such as ``origin/HEAD`` are skipped.
    """
    local: list[str] = []
    remote: list[str] = []
    for line in output.splitlines():
        parts = line.split("\0")
        if len(parts) < 3:
            continue
        refname, short, symref = parts[:3]
        if symref:
            continue
        if refname.startswith("refs/heads/"):
            local.append(short)
        elif refname.startswith("refs/remotes/"):
            remote.append(short)
    return local, remote


def parse_remotes(output: str) -> list[RemoteEntry]:
    """Parse ``git remote -v`` into one entry per remote, in listed order."""
    remotes: dict[str, RemoteEntry] = {}
    for line in output.splitlines():
        name, _, rest = line.partition("\t")
        if not rest:
            continue
        url, _, kind = rest.rpartition(" ")
        entry = remotes.setdefault(name, RemoteEntry(name=name))
        if kind == "(fetch)":
            entry.fetch_url = url
        elif kind == "(push)":
            entry.push_url = url
    return list(remotes.values())


def parse_change_summary(output: str) -> ChangeSummary:
    """Extract changed/inserted/deleted counts from a shortstat line."""
    match = _SHORTSTAT.search(output)
    if not match:
        return ChangeSummary()
    return ChangeSummary(
        changes=int(match.group("changes")),
        insertions=int(match.group("insertions") or 0),
        deletions=int(match.group("deletions") or 0),
    )


def parse_commit_output(output: str) -> tuple[str | None, str | None]:
    """Return (branch, abbreviated hash) from ``git commit`` output."""
    match = _COMMIT_HEADER.search(output)
    if not match:
        return None, None
    return match.group("branch"), match.group("hash")


def parse_diffstat_files(output: str) -> list[str]:
    """Return the paths listed in a diffstat block."""
    return [match.group("path") for match in _DIFFSTAT_LINE.finditer(output)]
