"""
Profile business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from comments import repository as comments_repository
from comments import service as comments_service
from posts import repository as posts_repository
from posts import service as posts_service

from . import repository, schemas

MAX_BIO_LENGTH = 500

logger = logging.getLogger(__name__)


def _to_user_response(user_row: dict) -> dict:
    return {
        "id": int(user_row["id"]),
        "username": str(user_row["username"]),
        "email": str(user_row["email"]),
        "bio": user_row.get("bio"),
        "createdAt": user_row["created_at"],
    }


async def get_profile(user_id: int) -> dict:
    user_row = await repository.get_profile(user_id)
    if user_row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    post_rows = await posts_repository.list_posts_by_author(user_id)
    comment_rows = await comments_repository.list_comments_for_posts([int(r["id"]) for r in post_rows])
    comments_by_post = comments_service.group_comments_by_post(comment_rows)

    profile = _to_user_response(user_row)
    profile["posts"] = [
        posts_service.format_post(row, comments_by_post.get(int(row["id"]), []), include_author=False)
        for row in post_rows
    ]
    return profile


async def update_bio(payload: schemas.UpdateBioRequest, *, user_id: int) -> dict:
    bio = payload.bio or None
    if bio is not None and len(bio) > MAX_BIO_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Bio must be {MAX_BIO_LENGTH} characters or less",
        )

    user_row = await repository.update_bio(user_id, bio)
    if user_row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    logger.info("bio_updated user_id=%s cleared=%s", user_id, bio is None)
    return {
        "message": "Bio updated successfully",
        "user": _to_user_response(user_row),
    }
