# graphlearn/domain/entities/review.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

MIN_RATING = 1
MAX_RATING = 5


def is_valid_rating(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and MIN_RATING <= value <= MAX_RATING


@dataclass(frozen=True)
class Review:
    """
    A user-submitted rating + text for one material.
    `id` and `date` are assigned by the review backend, never by the client.
    """
    id: int
    material_id: str
    text: str
    rating: int
    date: datetime
    author_name: str = ""

    def __post_init__(self):
        if not self.material_id:
            raise ValueError("Review.material_id is required")
        if not self.text or not self.text.strip():
            raise ValueError("Review.text must not be blank")
        if not is_valid_rating(self.rating):
            raise ValueError(f"Review.rating must be an int between {MIN_RATING} and {MAX_RATING}")
        if not isinstance(self.date, datetime):
            raise ValueError("Review.date must be a datetime")
