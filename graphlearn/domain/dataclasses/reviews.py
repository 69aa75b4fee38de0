from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from graphlearn.domain.entities.review import Review
from graphlearn.domain.enums.submit_status import SubmitStatus


@dataclass(frozen=True)
class ReviewDraft:
    """Review form contents. rating 0 means "not chosen yet"."""
    text: str = ""
    rating: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.text and self.rating == 0


@dataclass(frozen=True)
class SubmitResult:
    status: SubmitStatus
    review: Optional[Review] = None

    @property
    def ok(self) -> bool:
        return self.status == SubmitStatus.accepted
