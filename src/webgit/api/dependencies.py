"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Header, Request

from webgit.config import Settings
from webgit.git.gateway import RepositoryGateway
from webgit.security.session import SESSION_TOKEN_HEADER, SessionGuard


def get_settings_dep(request: Request) -> Settings:
    """Get the settings the app was created with."""
    return request.app.state.settings


def get_gateway(request: Request) -> RepositoryGateway:
    """Get the repository gateway from app state."""
    return request.app.state.gateway


def get_session_guard(request: Request) -> SessionGuard:
    """Get the session guard from app state."""
    return request.app.state.session_guard


def require_session_token(
    request: Request,
    token: Annotated[str | None, Header(alias=SESSION_TOKEN_HEADER)] = None,
) -> None:
    """Reject state-changing requests that lack the session token."""
    get_session_guard(request).verify(token)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings_dep)]
GatewayDep = Annotated[RepositoryGateway, Depends(get_gateway)]
SessionGuardDep = Annotated[SessionGuard, Depends(get_session_guard)]

# Route-level dependency for every mutating endpoint
RequireSessionToken = Depends(require_session_token)
