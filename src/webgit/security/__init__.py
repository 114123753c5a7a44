"""Input gates applied before any git command runs."""

from webgit.security.config_policy import ALLOWED_CONFIG_KEYS, check_config_set
from webgit.security.paths import resolve_repository_root, validate_paths
from webgit.security.refs import validate_branch_name, validate_revision
from webgit.security.session import SESSION_TOKEN_HEADER, SessionGuard

__all__ = [
    "ALLOWED_CONFIG_KEYS",
    "SESSION_TOKEN_HEADER",
    "SessionGuard",
    "check_config_set",
    "resolve_repository_root",
    "validate_branch_name",
    "validate_paths",
    "validate_revision",
]
