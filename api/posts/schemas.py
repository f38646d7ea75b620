"""
Pydantic schemas for post endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core import db


class CreatePostRequest(BaseModel):
    title: str | None = None
    content: str | None = None


class DeletePostRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    post_id: int | None = Field(default=None, alias="postId", le=db.MAX_INT4)
