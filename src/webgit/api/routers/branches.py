"""Branch API endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from webgit.api.dependencies import GatewayDep, RequireSessionToken
from webgit.core.models import BranchResult, BranchSummary

router = APIRouter(prefix="/branches")


# --- Request models ---

class CreateBranchRequest(BaseModel):
    """Request to create a branch, optionally switching to it."""

    name: str | None = None
    checkout: bool = False


class CheckoutBranchRequest(BaseModel):
    branch: str | None = None


# --- Endpoints ---

@router.get("", response_model=BranchSummary)
async def list_branches(gateway: GatewayDep) -> BranchSummary:
    """List local and remote-tracking branches."""
    return await gateway.get_branches()


@router.post("", response_model=BranchResult, dependencies=[RequireSessionToken])
async def create_branch(request: CreateBranchRequest, gateway: GatewayDep) -> BranchResult:
    """Create a branch."""
    return await gateway.create_branch(request.name, checkout=request.checkout)


@router.post("/checkout", response_model=BranchResult, dependencies=[RequireSessionToken])
async def checkout_branch(request: CheckoutBranchRequest, gateway: GatewayDep) -> BranchResult:
    """Switch to a branch."""
    return await gateway.checkout_branch(request.branch)


@router.delete("/{name:path}", response_model=BranchResult, dependencies=[RequireSessionToken])
async def delete_branch(name: str, gateway: GatewayDep) -> BranchResult:
    """Delete a local branch."""
    return await gateway.delete_branch(name)
