from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from graphlearn.domain.entities.material import Material
from graphlearn.domain.enums.empty_reason import EmptyReason


@dataclass(frozen=True)
class ListingResult:
    """What the list view renders for the current query + category."""
    items: List[Material] = field(default_factory=list)
    total: int = 0             # size of the whole catalog
    query: str = ""
    category: str = "all"
    empty_reason: EmptyReason = EmptyReason.none

    @property
    def is_search(self) -> bool:
        return bool(self.query.strip())
