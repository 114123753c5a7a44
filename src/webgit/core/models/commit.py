"""Commit models."""

from pydantic import Field

from webgit.core.models.base import ApiModel


class CommitRecord(ApiModel):
    """A commit as listed in history."""

    hash: str
    short_hash: str
    message: str
    body: str = ""
    author: str
    email: str
    date: str
    refs: str = ""


class CommitDetail(CommitRecord):
    """A single commit with its patch and file summary."""

    parents: list[str] = Field(default_factory=list)
    diff: str = ""
    stats: str = ""
