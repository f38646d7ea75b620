"""
Pydantic schemas for profile endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class UpdateBioRequest(BaseModel):
    bio: str | None = None
