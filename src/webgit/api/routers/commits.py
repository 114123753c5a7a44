"""Commit history endpoints."""

import re
from typing import Annotated

from fastapi import APIRouter, Query

from webgit.api.dependencies import GatewayDep, SettingsDep
from webgit.core.models import CommitDetail, CommitRecord

router = APIRouter(prefix="/commits")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_limit(raw: str | None, default: int) -> int:
    """Read the leading integer of ``raw``; unparseable or zero means ``default``."""
    match = _LEADING_INT.match(raw or "")
    if not match:
        return default
    return int(match.group(1)) or default


@router.get("", response_model=list[CommitRecord])
async def list_commits(
    gateway: GatewayDep,
    settings: SettingsDep,
    limit: Annotated[str | None, Query()] = None,
) -> list[CommitRecord]:
    """List recent commits, newest first."""
    return await gateway.get_commit_history(parse_limit(limit, settings.default_history_limit))


@router.get("/{commit_hash}", response_model=CommitDetail)
async def get_commit(commit_hash: str, gateway: GatewayDep) -> CommitDetail:
    """Get one commit with its diff and file summary."""
    return await gateway.get_commit_details(commit_hash)
