from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AssessmentRead(BaseModel):
    id: str
    title: str
    description: str = ""
    material_id: str = Field(alias="materialId")
    category: Optional[str] = None
    difficulty: str
    estimated_time: int = Field(alias="estimatedTime")
    passing_score: int = Field(alias="passingScore")
    question_count: int = Field(alias="questionCount")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
