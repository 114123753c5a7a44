"""Diff, staging and commit endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Query
from pydantic import BaseModel

from webgit.api.dependencies import GatewayDep, RequireSessionToken
from webgit.core.models import CommitResult, OperationResult

router = APIRouter()


# --- Request/Response models ---

class FilesRequest(BaseModel):
    """Paths to act on; omitted means every pending change.

    Elements are left untyped here so the path validator, not request
    parsing, decides what is rejected.
    """

    files: list[Any] | None = None


class CommitRequest(BaseModel):
    message: str | None = None


class DiffResponse(BaseModel):
    diff: str


# --- Endpoints ---

@router.get("/diff", response_model=DiffResponse)
async def get_diff(
    gateway: GatewayDep,
    file: Annotated[str | None, Query()] = None,
    staged: bool = False,
) -> DiffResponse:
    """Unified diff of the working tree, or of the index when staged is set."""
    return DiffResponse(diff=await gateway.get_diff(file or None, staged=staged))


@router.post("/stage", response_model=OperationResult, dependencies=[RequireSessionToken])
async def stage_files(gateway: GatewayDep, request: FilesRequest | None = None) -> OperationResult:
    """Stage files."""
    return await gateway.stage_files(request.files if request else None)


@router.post("/unstage", response_model=OperationResult, dependencies=[RequireSessionToken])
async def unstage_files(gateway: GatewayDep, request: FilesRequest | None = None) -> OperationResult:
    """Unstage files."""
    return await gateway.unstage_files(request.files if request else None)


@router.post("/commit", response_model=CommitResult, dependencies=[RequireSessionToken])
async def commit(gateway: GatewayDep, request: CommitRequest | None = None) -> CommitResult:
    """Commit the index."""
    return await gateway.commit(request.message if request else None)


@router.post("/discard", response_model=OperationResult, dependencies=[RequireSessionToken])
async def discard_changes(gateway: GatewayDep, request: FilesRequest | None = None) -> OperationResult:
    """Discard working-tree changes."""
    return await gateway.discard_changes(request.files if request else None)
