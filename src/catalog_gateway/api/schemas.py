"""API request schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateTagRequest(BaseModel):
    name: str = Field(min_length=1, max_length=200, pattern=r"^[^\s/]+$")
    description: str | None = None


class AddTagRequest(BaseModel):
    tag: str = Field(min_length=1)
