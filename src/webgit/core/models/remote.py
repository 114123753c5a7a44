"""Remote models."""

from webgit.core.models.base import ApiModel


class RemoteEntry(ApiModel):
    """A configured remote."""

    name: str
    fetch_url: str | None = None
    push_url: str | None = None
