"""Remote and synchronisation endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from webgit.api.dependencies import GatewayDep, RequireSessionToken
from webgit.core.models import OperationResult, PullResult, RemoteEntry

router = APIRouter()


# --- Request models ---

class PullRequest(BaseModel):
    rebase: bool = False


class PushRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    force: bool = False
    set_upstream: bool = Field(default=False, alias="setUpstream")


# --- Endpoints ---

@router.get("/remotes", response_model=list[RemoteEntry])
async def list_remotes(gateway: GatewayDep) -> list[RemoteEntry]:
    """List configured remotes."""
    return await gateway.get_remotes()


@router.post("/fetch", response_model=OperationResult, dependencies=[RequireSessionToken])
async def fetch(gateway: GatewayDep) -> OperationResult:
    """Fetch from all remotes."""
    return await gateway.fetch()


@router.post("/pull", response_model=PullResult, dependencies=[RequireSessionToken])
async def pull(gateway: GatewayDep, request: PullRequest | None = None) -> PullResult:
    """Pull the upstream branch, merging or rebasing."""
    rebase = request.rebase if request else False
    return await gateway.pull(rebase=rebase)


@router.post("/push", response_model=OperationResult, dependencies=[RequireSessionToken])
async def push(gateway: GatewayDep, request: PushRequest | None = None) -> OperationResult:
    """Push the current branch."""
    request = request or PushRequest()
    return await gateway.push(force=request.force, set_upstream=request.set_upstream)
