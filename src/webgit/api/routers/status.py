"""Working tree status endpoint."""

from fastapi import APIRouter

from webgit.api.dependencies import GatewayDep
from webgit.core.models import StatusSnapshot

router = APIRouter()


@router.get("/status", response_model=StatusSnapshot)
async def get_status(gateway: GatewayDep) -> StatusSnapshot:
    """Current branch, upstream position and changed files."""
    return await gateway.get_status()
