"""Git integration module for WebGit."""

from webgit.git.gateway import GitRepositoryGateway, RepositoryGateway
from webgit.git.runner import GitResult, GitRunner

__all__ = ["GitRepositoryGateway", "GitResult", "GitRunner", "RepositoryGateway"]
