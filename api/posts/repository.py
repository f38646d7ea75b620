"""
Post persistence (raw SQL).
"""

from __future__ import annotations

from core import db

_POST_WITH_AUTHOR_COLUMNS = """
    p.id, p.title, p.content, p.created_at, p.author_id,
    u.username AS author_username, u.bio AS author_bio
"""


async def create_post(*, author_id: int, title: str, content: str) -> dict:
    row = await db.fetch_one(
        f"""
        WITH p AS (
            INSERT INTO posts (title, content, author_id)
            VALUES ($1, $2, $3)
            RETURNING id, title, content, created_at, author_id
        )
        SELECT {_POST_WITH_AUTHOR_COLUMNS}
        FROM p
        JOIN users u ON u.id = p.author_id
        """,
        title,
        content,
        author_id,
    )
    if row is None:
        raise RuntimeError("Failed to create post.")
    return row


async def get_post_owner(post_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, author_id
        FROM posts
        WHERE id = $1
        """,
        post_id,
    )


async def delete_post(post_id: int) -> bool:
    """
    Delete a post; its comments go with it (ON DELETE CASCADE).
    """
    row = await db.fetch_one(
        """
        DELETE FROM posts
        WHERE id = $1
        RETURNING id
        """,
        post_id,
    )
    return row is not None


async def list_posts(*, limit: int | None = None, offset: int = 0) -> list[dict]:
    # LIMIT NULL means no limit in Postgres.
    return await db.fetch_all(
        f"""
        SELECT {_POST_WITH_AUTHOR_COLUMNS}
        FROM posts p
        JOIN users u ON u.id = p.author_id
        ORDER BY p.created_at DESC, p.id DESC
        LIMIT $1 OFFSET $2
        """,
        limit,
        offset,
    )


async def list_posts_by_author(author_id: int) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, title, content, created_at, author_id
        FROM posts
        WHERE author_id = $1
        ORDER BY created_at DESC, id DESC
        """,
        author_id,
    )
