"""
Feed API endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from auth import dependencies as auth_dependencies

from . import service

router = APIRouter(prefix="/api/main")


@router.get("/feed")
async def feed(
    limit: int | None = Query(default=None, ge=1, le=200),
    offset: int = Query(0, ge=0),
    _: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    """
    All posts newest first. Without `limit` the whole feed is returned.
    """
    return await service.build_feed(limit=limit, offset=offset)
