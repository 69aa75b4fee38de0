from __future__ import annotations

from graphlearn.domain.entities.assessment import Assessment
from graphlearn.domain.entities.material import Material
from graphlearn.services.schemas.assessment import AssessmentRead
from graphlearn.services.schemas.material import MaterialRead


def to_read_schema(m: Material) -> MaterialRead:
    return MaterialRead(
        id=m.id,
        title=m.title,
        description=m.description,
        type=m.type,
        category=m.category,
        duration=m.duration,
        rating=m.rating,
        thumbnail_url=m.thumbnail_url,
        video_url=m.video_url,
        author=m.author,
        content=m.content,
    )


def assessment_to_read_schema(a: Assessment) -> AssessmentRead:
    return AssessmentRead(
        id=a.id,
        title=a.title,
        description=a.description,
        material_id=a.material_id,
        category=a.category,
        difficulty=a.difficulty,
        estimated_time=a.estimated_time,
        passing_score=a.passing_score,
        question_count=a.question_count,
    )
