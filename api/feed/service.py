"""
Feed assembly.
"""

from __future__ import annotations

from comments import repository as comments_repository
from comments import service as comments_service
from posts import repository as posts_repository
from posts import service as posts_service


async def build_feed(*, limit: int | None = None, offset: int = 0) -> dict:
    post_rows = await posts_repository.list_posts(limit=limit, offset=offset)
    comment_rows = await comments_repository.list_comments_for_posts([int(r["id"]) for r in post_rows])
    comments_by_post = comments_service.group_comments_by_post(comment_rows)

    return {
        "posts": [
            posts_service.format_post(row, comments_by_post.get(int(row["id"]), []))
            for row in post_rows
        ]
    }
