"""Session token endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from webgit.api.dependencies import SessionGuardDep

router = APIRouter()


class SessionTokenResponse(BaseModel):
    token: str


@router.get("/csrf-token", response_model=SessionTokenResponse)
async def get_csrf_token(guard: SessionGuardDep) -> SessionTokenResponse:
    """Return the token mutating requests must send in X-CSRF-Token.

    Pages on other origins cannot read this response, which is what makes
    the token useful.
    """
    return SessionTokenResponse(token=guard.token)
