# graphlearn/services/mappers/review.py
from __future__ import annotations

from graphlearn.domain.entities.review import Review
from graphlearn.services.schemas.review import ReviewRead


def to_domain(s: ReviewRead, material_id: str) -> Review:
    # wire form has no material id; it is implied by the URL it came from
    return Review(
        id=s.id,
        material_id=material_id,
        text=s.text,
        rating=s.rating,
        date=s.date,
        author_name=s.author_name,
    )


def to_read_schema(r: Review) -> ReviewRead:
    return ReviewRead(
        id=r.id,
        text=r.text,
        rating=r.rating,
        date=r.date,
        author_name=r.author_name,
    )
