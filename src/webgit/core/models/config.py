"""Git configuration models."""

from webgit.core.models.base import ApiModel


class GitConfigValues(ApiModel):
    """Values of the configuration keys exposed to the client."""

    user_name: str = ""
    user_email: str = ""
    default_branch: str = "main"
