"""Git configuration endpoints."""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from webgit.api.dependencies import GatewayDep, RequireSessionToken
from webgit.core.models import GitConfigValues, OperationResult

router = APIRouter(prefix="/config")


class SetConfigRequest(BaseModel):
    """Key/value pair; checked against the allow-list by the gateway."""

    key: Any = None
    value: Any = None


@router.get("", response_model=GitConfigValues)
async def get_config(gateway: GatewayDep) -> GitConfigValues:
    """Get user name, email and default branch."""
    return await gateway.get_config()


@router.post("", response_model=OperationResult, dependencies=[RequireSessionToken])
async def set_config(request: SetConfigRequest, gateway: GatewayDep) -> OperationResult:
    """Set one allow-listed configuration key."""
    return await gateway.set_config(request.key, request.value)
