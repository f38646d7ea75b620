"""
Profile API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path

from auth import dependencies as auth_dependencies
from core import db

from . import schemas, service

router = APIRouter(prefix="/api/users")


@router.put("/update-bio")
async def update_bio(
    request: schemas.UpdateBioRequest | None = None,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    # No body clears the bio, same as an empty one.
    return await service.update_bio(request or schemas.UpdateBioRequest(), user_id=int(current_user["id"]))


@router.get("/{user_id}")
async def get_user(user_id: int = Path(..., ge=1, le=db.MAX_INT4)) -> dict:
    """
    Public profile with the user's posts, newest first.
    """
    return await service.get_profile(user_id)
