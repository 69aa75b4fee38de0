# graphlearn/services/reviews/memory_backend.py
from __future__ import annotations

import itertools
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional

from graphlearn.common.logging import get_logger
from graphlearn.domain.entities.review import Review
from graphlearn.domain.ports.identity import IdentityPort

logger = get_logger(__name__)

DEFAULT_AUTHOR = "Anonymous"


class InMemoryReviewBackend:
    """
    Review backend kept in process memory. Assigns ids and timestamps the
    way a server would; lists come back most recent first.
    """

    def __init__(
        self,
        *,
        material_ids: Optional[Iterable[str]] = None,
        identity: Optional[IdentityPort] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._known = set(material_ids) if material_ids is not None else None
        self._identity = identity
        self._clock = clock
        self._ids = itertools.count(1)
        self._by_material: Dict[str, List[Review]] = {}

    def _check(self, material_id: str) -> None:
        if self._known is not None and material_id not in self._known:
            raise KeyError(f"unknown material: {material_id}")

    def _author(self, author_name: Optional[str]) -> str:
        if author_name and author_name.strip():
            return author_name.strip()
        if self._identity is not None and self._identity.current_user:
            return self._identity.current_user
        return DEFAULT_AUTHOR

    async def get_comments(self, material_id: str) -> List[Review]:
        self._check(material_id)
        return list(self._by_material.get(material_id, []))

    async def add_comment(self, material_id: str, text: str, rating: int, *, author_name: Optional[str] = None) -> Review:
        self._check(material_id)
        review = Review(
            id=next(self._ids),
            material_id=material_id,
            text=text.strip(),
            rating=rating,
            date=self._clock(),
            author_name=self._author(author_name),
        )
        self._by_material.setdefault(material_id, []).insert(0, review)
        logger.debug("stored review %s for %s", review.id, material_id)
        return review
