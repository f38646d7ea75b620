"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def create_comment(*, post_id: int, author_id: int, content: str) -> dict:
    row = await db.fetch_one(
        """
        WITH inserted AS (
            INSERT INTO comments (content, post_id, author_id)
            VALUES ($1, $2, $3)
            RETURNING id, content, post_id, author_id, created_at
        )
        SELECT i.id, i.content, i.post_id, i.author_id, i.created_at,
               u.username AS author_username
        FROM inserted i
        JOIN users u ON u.id = i.author_id
        """,
        content,
        post_id,
        author_id,
    )
    if row is None:
        raise RuntimeError("Failed to create comment.")
    return row


async def get_comment_owner(comment_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, author_id
        FROM comments
        WHERE id = $1
        """,
        comment_id,
    )


async def delete_comment(comment_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM comments
        WHERE id = $1
        RETURNING id
        """,
        comment_id,
    )
    return row is not None


async def list_comments_for_posts(post_ids: list[int]) -> list[dict]:
    """
    Comments for the given posts, newest first within the whole result.
    """
    if not post_ids:
        return []
    return await db.fetch_all(
        """
        SELECT c.id, c.content, c.post_id, c.author_id, c.created_at,
               u.username AS author_username
        FROM comments c
        JOIN users u ON u.id = c.author_id
        WHERE c.post_id = ANY($1::int[])
        ORDER BY c.created_at DESC, c.id DESC
        """,
        post_ids,
    )
