"""
Auth persistence helpers (the credential side of the `users` table).
"""

from __future__ import annotations

from core import db


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def create_user(*, username: str, email: str, password_hash: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO users (username, email, password_hash)
        VALUES ($1, $2, $3)
        RETURNING id, username, email, bio, created_at
        """,
        username,
        normalize_email(email),
        password_hash,
    )
    if row is None:
        raise RuntimeError("Failed to create user.")
    return row


async def get_user_by_email(email: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, email, password_hash, bio, created_at
        FROM users
        WHERE lower(email) = lower($1)
        """,
        normalize_email(email),
    )


async def find_user_by_username_or_email(*, username: str, email: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, email
        FROM users
        WHERE username = $1
           OR lower(email) = lower($2)
        LIMIT 1
        """,
        username,
        normalize_email(email),
    )


async def get_user_by_id(user_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, username, email, bio, created_at
        FROM users
        WHERE id = $1
        """,
        user_id,
    )
