"""Working tree status models."""

from pydantic import Field

from webgit.core.models.base import ApiModel


class RenamedFile(ApiModel):
    """A rename detected in the index."""

    from_path: str = Field(alias="from")
    to_path: str = Field(alias="to")


class FileChanges(ApiModel):
    """Changed paths grouped by category.

    A path can appear in more than one category, e.g. a file that is
    staged and then modified again is both ``staged`` and ``modified``.
    """

    modified: list[str] = Field(default_factory=list)
    added: list[str] = Field(default_factory=list)
    deleted: list[str] = Field(default_factory=list)
    untracked: list[str] = Field(default_factory=list)
    staged: list[str] = Field(default_factory=list)
    renamed: list[RenamedFile] = Field(default_factory=list)
    conflicted: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not any(
            (
                self.modified,
                self.added,
                self.deleted,
                self.untracked,
                self.staged,
                self.renamed,
                self.conflicted,
            )
        )


class StatusSnapshot(ApiModel):
    """Current branch, upstream position and changed files."""

    current: str | None = None
    tracking: str | None = None
    ahead: int = 0
    behind: int = 0
    files: FileChanges = Field(default_factory=FileChanges)
    is_clean: bool = True
