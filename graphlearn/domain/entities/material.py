# graphlearn/domain/entities/material.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Optional

from graphlearn.domain.enums.material_type import MaterialType


@dataclass(frozen=True)
class Material:
    """
    One catalog entry (article, video or tutorial).

    `id` is the primary key inside the catalog, the foreign key a Review uses
    to point at its parent, and the lookup key into the assessment registry.
    Instances are built once by the material source and never mutated.

    `duration` is display text ("10 min"), not a comparable quantity.
    `rating` is the author-seeded default shown until reviews are loaded.
    """
    id: str
    title: str
    description: str
    type: MaterialType
    category: str
    duration: str
    rating: float
    thumbnail_url: Optional[str] = None
    video_url: Optional[str] = None
    author: Optional[str] = None
    content: Optional[str] = None

    def __post_init__(self):
        if not self.id or not str(self.id).strip():
            raise ValueError("Material.id is required")
        if not self.title or not self.title.strip():
            raise ValueError("Material.title is required")
        if not self.category or not self.category.strip():
            raise ValueError("Material.category is required")
        try:
            object.__setattr__(self, "type", MaterialType(self.type))
        except ValueError:
            raise ValueError(f"Material.type must be one of {[t.value for t in MaterialType]}, got {self.type!r}")
        if isinstance(self.rating, bool) or not isinstance(self.rating, (int, float)):
            raise ValueError("Material.rating must be a number")
        if self.rating < 0 or self.rating > 5:
            raise ValueError("Material.rating must be between 0 and 5 inclusive")

    @property
    def has_video(self) -> bool:
        return bool(self.video_url)

    def as_dict(self):
        return asdict(self)
