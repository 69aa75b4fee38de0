from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Assessment:
    """
    Knowledge check attached to a material. Only the fields needed to hand
    off to the assessment flow live here; questions stay with the registry.
    """
    id: str
    title: str
    material_id: str
    description: str = ""
    category: Optional[str] = None
    difficulty: str = "easy"
    estimated_time: int = 0   # minutes
    passing_score: int = 70   # percent
    question_count: int = 0

    def __post_init__(self):
        if not self.id or not self.id.strip():
            raise ValueError("Assessment.id is required")
        if not self.material_id:
            raise ValueError("Assessment.material_id is required")
        if self.passing_score < 0 or self.passing_score > 100:
            raise ValueError("Assessment.passing_score must be a percentage")
