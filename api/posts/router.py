"""
Post API endpoints.

Bodies are optional so a missing body still reaches the service checks.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter(prefix="/api/posts")


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_post(
    request: schemas.CreatePostRequest | None = None,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.create_post(request or schemas.CreatePostRequest(), author_id=int(current_user["id"]))


@router.delete("/delete")
async def delete_post(
    request: schemas.DeletePostRequest | None = None,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.delete_post(request or schemas.DeletePostRequest(), user_id=int(current_user["id"]))
