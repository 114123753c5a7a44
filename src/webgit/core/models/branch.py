"""Branch models."""

from pydantic import Field

from webgit.core.models.base import ApiModel


class BranchSummary(ApiModel):
    """Local and remote-tracking branches."""

    current: str | None = None
    local: list[str] = Field(default_factory=list)
    remote: list[str] = Field(default_factory=list)
