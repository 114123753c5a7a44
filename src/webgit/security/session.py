"""Per-process session token protecting state-changing requests.

This guards against cross-site request forgery: a page on another origin
can make the browser send requests to the local server, but it cannot
read the token from ``/api/csrf-token`` and so cannot present it. It is
not user authentication.
"""

import secrets

from webgit.core.exceptions import ForbiddenError

SESSION_TOKEN_HEADER = "X-CSRF-Token"

# 32 bytes = 256 bits of entropy.
TOKEN_BYTES = 32


class SessionGuard:
    """Holds the session token for one server process.

    The token is created once, compared on every mutating request and
    never rotated, persisted or logged. Restarting the server issues a new
    one, so a stale client must fetch it again.
    """

    def __init__(self, token: str | None = None) -> None:
        self._token = token or secrets.token_urlsafe(TOKEN_BYTES)

    @property
    def token(self) -> str:
        return self._token

    def verify(self, presented: str | None) -> None:
        """Raise ForbiddenError unless ``presented`` equals the token exactly."""
        if not presented:
            raise ForbiddenError("Missing CSRF token")

        # Compare bytes: compare_digest rejects non-ASCII str arguments.
        if not secrets.compare_digest(
            presented.encode("utf-8"), self._token.encode("utf-8")
        ):
            raise ForbiddenError("Invalid CSRF token")

    def __repr__(self) -> str:
        return "SessionGuard(token=<redacted>)"
