"""
Post business logic and the shared post response shape.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas

MAX_TITLE_LENGTH = 100
MAX_CONTENT_LENGTH = 1000

logger = logging.getLogger(__name__)


def format_post(row: dict, comments: list[dict], *, include_author: bool = True) -> dict:
    """
    Shape a post row plus its already-formatted comments.

    Feed posts carry their author; profile posts omit it because the profile
    owner is the author of all of them.
    """
    post = {
        "id": int(row["id"]),
        "title": str(row["title"]),
        "content": str(row["content"]),
        "createdAt": row["created_at"],
    }
    if include_author:
        post["author"] = {
            "id": int(row["author_id"]),
            "username": str(row["author_username"]),
            "bio": row.get("author_bio"),
        }
    post["comments"] = comments
    return post


async def create_post(payload: schemas.CreatePostRequest, *, author_id: int) -> dict:
    title = (payload.title or "").strip()
    content = (payload.content or "").strip()

    if not title or not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Title and content are required",
        )
    if len(title) > MAX_TITLE_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Title must be {MAX_TITLE_LENGTH} characters or less",
        )
    if len(content) > MAX_CONTENT_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Content must be {MAX_CONTENT_LENGTH} characters or less",
        )

    row = await repository.create_post(author_id=author_id, title=title, content=content)
    logger.info("post_created post_id=%s author_id=%s", row["id"], author_id)
    return {
        "message": "Post created successfully",
        "post": format_post(row, []),
    }


async def delete_post(payload: schemas.DeletePostRequest, *, user_id: int) -> dict:
    if not payload.post_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Post ID is required",
        )

    post = await repository.get_post_owner(payload.post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")

    if int(post["author_id"]) != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only delete your own posts",
        )

    await repository.delete_post(payload.post_id)
    logger.info("post_deleted post_id=%s user_id=%s", payload.post_id, user_id)
    return {"message": "Post deleted successfully"}
