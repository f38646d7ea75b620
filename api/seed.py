"""
Reset the database to a small demo data set.

Run from `api/`:  python seed.py
"""

from __future__ import annotations

import asyncio
import logging

import asyncpg

from auth import security
from core import db, log, schema, settings

logger = logging.getLogger(__name__)

SEED_USERS: tuple[dict, ...] = (
    {"username": "robin", "email": "robin@example.com", "bio": "Love birdwatching"},
    {"username": "sparrow", "email": "sparrow@example.com", "bio": "Sparrows are life"},
    {"username": "eagle", "email": "eagle@example.com", "bio": "Soaring high"},
    {"username": "owl", "email": "owl@example.com", "bio": "Night watcher"},
    {"username": "finch", "email": "finch@example.com", "bio": "Small but mighty"},
)

# (author username, title, content)
SEED_POSTS: tuple[tuple[str, str, str], ...] = (
    ("robin", "Morning Walk", "Saw some robins chirping!"),
    ("robin", "Afternoon Spot", "Noticed a woodpecker today."),
    ("robin", "Evening Watch", "Owls started calling at dusk."),
    ("robin", "Backyard Find", "A nest with eggs!"),
    ("sparrow", "City Birds", "Pigeons and sparrows at the park."),
    ("sparrow", "Evening Feed", "Fed the sparrows with grains."),
    ("eagle", "Mountain Flight", "Saw an eagle soaring over the mountains."),
)

# (author username, commented post title, content)
SEED_COMMENTS: tuple[tuple[str, str, str], ...] = (
    ("sparrow", "Morning Walk", "Wow, sounds amazing!"),
    ("eagle", "Morning Walk", "Wish I saw that too!"),
    ("robin", "Mountain Flight", "Great sighting!"),
    ("eagle", "City Birds", "I love sparrows too!"),
)


def seed_password() -> str:
    return settings.env_str("SEED_PASSWORD", "birdbook123")


async def clear_data(conn: asyncpg.Connection) -> None:
    # Children first so foreign keys never block the delete.
    await conn.execute("DELETE FROM comments")
    await conn.execute("DELETE FROM posts")
    await conn.execute("DELETE FROM users")


async def seed() -> dict[str, int]:
    """
    Replace all data with the demo set. Runs in one transaction, so a failure
    leaves the previous data untouched.
    """
    await schema.ensure_schema()
    password_hash = security.hash_password(seed_password())

    async with db.transaction() as conn:
        await clear_data(conn)
        return await _insert_demo_data(conn, password_hash)


async def _insert_demo_data(conn: asyncpg.Connection, password_hash: str) -> dict[str, int]:
    user_ids: dict[str, int] = {}
    for user in SEED_USERS:
        row = await conn.fetchrow(
            """
            INSERT INTO users (username, email, password_hash, bio)
            VALUES ($1, $2, $3, $4)
            RETURNING id
            """,
            user["username"],
            user["email"],
            password_hash,
            user["bio"],
        )
        if row is None:
            raise RuntimeError(f"Failed to seed user {user['username']}.")
        user_ids[user["username"]] = int(row["id"])
    logger.info("seed_users count=%s", len(user_ids))

    post_ids: dict[str, int] = {}
    for author, title, content in SEED_POSTS:
        row = await conn.fetchrow(
            """
            INSERT INTO posts (title, content, author_id)
            VALUES ($1, $2, $3)
            RETURNING id
            """,
            title,
            content,
            user_ids[author],
        )
        if row is None:
            raise RuntimeError(f"Failed to seed post {title!r}.")
        post_ids[title] = int(row["id"])
    logger.info("seed_posts count=%s", len(post_ids))

    for author, post_title, content in SEED_COMMENTS:
        await conn.execute(
            """
            INSERT INTO comments (content, post_id, author_id)
            VALUES ($1, $2, $3)
            """,
            content,
            post_ids[post_title],
            user_ids[author],
        )
    logger.info("seed_comments count=%s", len(SEED_COMMENTS))

    return {
        "users": len(user_ids),
        "posts": len(post_ids),
        "comments": len(SEED_COMMENTS),
    }


async def main() -> None:
    await db.init_pool()
    try:
        counts = await seed()
    finally:
        await db.close_pool()
    logger.info("seed_complete users=%s posts=%s comments=%s", counts["users"], counts["posts"], counts["comments"])


if __name__ == "__main__":
    log.configure_logging()
    asyncio.run(main())
