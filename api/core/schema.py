"""
Database schema (idempotent DDL).

Deleting a post removes its comments; deleting a user removes their posts and
comments.
"""

from __future__ import annotations

import logging

from . import db

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id            SERIAL PRIMARY KEY,
        username      TEXT NOT NULL UNIQUE,
        email         TEXT NOT NULL UNIQUE,
        password_hash TEXT NOT NULL,
        bio           TEXT,
        created_at    TIMESTAMPTZ NOT NULL DEFAULT now(),
        updated_at    TIMESTAMPTZ NOT NULL DEFAULT now()
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS posts (
        id         SERIAL PRIMARY KEY,
        title      VARCHAR(100) NOT NULL,
        content    VARCHAR(1000) NOT NULL,
        author_id  INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
        created_at TIMESTAMPTZ NOT NULL DEFAULT now()
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS comments (
        id         SERIAL PRIMARY KEY,
        content    VARCHAR(500) NOT NULL,
        post_id    INTEGER NOT NULL REFERENCES posts(id) ON DELETE CASCADE,
        author_id  INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
        created_at TIMESTAMPTZ NOT NULL DEFAULT now()
    )
    """,
    "CREATE INDEX IF NOT EXISTS posts_created_at_idx ON posts (created_at DESC)",
    "CREATE INDEX IF NOT EXISTS posts_author_id_idx ON posts (author_id)",
    "CREATE INDEX IF NOT EXISTS comments_post_id_idx ON comments (post_id)",
)


async def ensure_schema() -> None:
    for statement in SCHEMA_STATEMENTS:
        await db.execute(statement)
    logger.info("schema_ready tables=users,posts,comments")
