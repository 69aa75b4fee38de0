from __future__ import annotations
from typing import Protocol, Sequence
from graphlearn.domain.entities.review import Review

class ReviewBackendPort(Protocol):
    async def get_comments(self, material_id: str) -> Sequence[Review]: ...

    # backend assigns id + date and returns the canonical review
    async def add_comment(self, material_id: str, text: str, rating: int) -> Review: ...
