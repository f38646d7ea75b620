"""
Comment API endpoints.

Bodies are optional so a missing body still reaches the service checks.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter(prefix="/api/comments")


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: schemas.CreateCommentRequest | None = None,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.create_comment(
        request or schemas.CreateCommentRequest(),
        author_id=int(current_user["id"]),
    )


@router.delete("/delete")
async def delete_comment(
    request: schemas.DeleteCommentRequest | None = None,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.delete_comment(
        request or schemas.DeleteCommentRequest(),
        user_id=int(current_user["id"]),
    )
