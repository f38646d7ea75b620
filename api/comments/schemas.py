"""
Pydantic schemas for comment endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core import db


class CreateCommentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    post_id: int | None = Field(default=None, alias="postId", le=db.MAX_INT4)
    content: str | None = None


class DeleteCommentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    comment_id: int | None = Field(default=None, alias="commentId", le=db.MAX_INT4)
