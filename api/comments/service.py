"""
Comment business logic.
"""

from __future__ import annotations

import logging
from collections import defaultdict

import asyncpg
from fastapi import HTTPException, status

from posts import repository as posts_repository

from . import repository, schemas

MAX_COMMENT_LENGTH = 500

logger = logging.getLogger(__name__)


def format_comment(row: dict) -> dict:
    return {
        "id": int(row["id"]),
        "content": str(row["content"]),
        "createdAt": row["created_at"],
        "author": {
            "id": int(row["author_id"]),
            "username": str(row["author_username"]),
        },
    }


def group_comments_by_post(rows: list[dict]) -> dict[int, list[dict]]:
    """
    Bucket comment rows per post id, keeping the query order inside each bucket.
    """
    grouped: dict[int, list[dict]] = defaultdict(list)
    for row in rows:
        grouped[int(row["post_id"])].append(format_comment(row))
    return grouped


def _post_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


async def create_comment(payload: schemas.CreateCommentRequest, *, author_id: int) -> dict:
    content = (payload.content or "").strip()
    if not payload.post_id or not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Post ID and content are required",
        )
    if len(content) > MAX_COMMENT_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Comment must be {MAX_COMMENT_LENGTH} characters or less",
        )

    post = await posts_repository.get_post_owner(payload.post_id)
    if post is None:
        raise _post_not_found()

    try:
        row = await repository.create_comment(
            post_id=payload.post_id,
            author_id=author_id,
            content=content,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        # Post was deleted between the existence check and the insert.
        raise _post_not_found() from exc

    logger.info("comment_created comment_id=%s post_id=%s author_id=%s", row["id"], payload.post_id, author_id)
    return {
        "message": "Comment created successfully",
        "comment": format_comment(row),
    }


async def delete_comment(payload: schemas.DeleteCommentRequest, *, user_id: int) -> dict:
    if not payload.comment_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment ID is required",
        )

    comment = await repository.get_comment_owner(payload.comment_id)
    if comment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")

    if int(comment["author_id"]) != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only delete your own comments",
        )

    await repository.delete_comment(payload.comment_id)
    logger.info("comment_deleted comment_id=%s user_id=%s", payload.comment_id, user_id)
    return {"message": "Comment deleted successfully"}
