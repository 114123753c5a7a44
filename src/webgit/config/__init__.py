"""Configuration for WebGit."""

from webgit.config.settings import LOOPBACK_HOST, Settings, get_settings

__all__ = ["LOOPBACK_HOST", "Settings", "get_settings"]
