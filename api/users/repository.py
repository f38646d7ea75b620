"""
Profile persistence (the public side of the `users` table).
"""

from __future__ import annotations

from core import db


async def get_profile(user_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, email, bio, created_at
        FROM users
        WHERE id = $1
        """,
        user_id,
    )


async def update_bio(user_id: int, bio: str | None) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE users
        SET bio = $2,
            updated_at = now()
        WHERE id = $1
        RETURNING id, username, email, bio, created_at
        """,
        user_id,
        bio,
    )
