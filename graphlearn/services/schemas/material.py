from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from graphlearn.domain.enums.material_type import MaterialType


class MaterialRead(BaseModel):
    id: str
    title: str
    description: str
    type: MaterialType
    category: str
    duration: str
    rating: float
    thumbnail_url: Optional[str] = Field(default=None, alias="thumbnailUrl")
    video_url: Optional[str] = Field(default=None, alias="videoUrl")
    author: Optional[str] = None
    content: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class CategoryOptionRead(BaseModel):
    id: str
    label: str

    model_config = ConfigDict(from_attributes=True)
