from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewCreate(BaseModel):
    text: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)  # 1..5
    author_name: Optional[str] = Field(default=None, alias="authorName")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("text")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must not be blank")
        return v.strip()


class ReviewRead(BaseModel):
    id: int
    text: str
    rating: int
    date: datetime
    author_name: str = Field(default="", alias="authorName")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class ReviewList(BaseModel):
    comments: List[ReviewRead] = Field(default_factory=list)


class ReviewEnvelope(BaseModel):
    comment: ReviewRead
