"""Tests for branch name and revision checks."""

import pytest

from webgit.core.exceptions import ValidationError
from webgit.security.refs import validate_branch_name, validate_revision


@pytest.mark.unit
class TestValidateBranchName:
    """Tests for validate_branch_name."""

    @pytest.mark.parametrize("name", ["main", "feature/login", "fix-123", "release/v1.2", "user@work"])
    def test_accepts_valid_names(self, name: str) -> None:
        assert validate_branch_name(name) == name

    @pytest.mark.parametrize(
        "name",
        [
            "-D",
            "--upload-pack=evil",
            "HEAD",
            "has space",
            "a..b",
            "a~1",
            "a^",
            "a:b",
            "a?",
            "a*",
            "a[b",
            "a\\b",
            "/leading",
            "trailing/",
            "trailing.",
            "a//b",
            ".hidden",
            "dir/.hidden",
            "name.lock",
            "a@{1}",
            "@",
            "tab\tname",
        ],
    )
    def test_rejects_invalid_names(self, name: str) -> None:
        with pytest.raises(ValidationError):
            validate_branch_name(name)

    @pytest.mark.parametrize("name", [None, "", 5])
    def test_rejects_empty_or_non_string(self, name: object) -> None:
        with pytest.raises(ValidationError):
            validate_branch_name(name)


@pytest.mark.unit
class TestValidateRevision:
    """Tests for validate_revision."""

    @pytest.mark.parametrize("revision", ["a1b2c3d", "0" * 40, "HEAD~1", "main"])
    def test_accepts_revisions(self, revision: str) -> None:
        assert validate_revision(revision) == revision

    @pytest.mark.parametrize("revision", ["", "--output=/tmp/x", "-p", "a b", "a\nb", "x" * 300])
    def test_rejects_bad_revisions(self, revision: str) -> None:
        with pytest.raises(ValidationError):
            validate_revision(revision)
