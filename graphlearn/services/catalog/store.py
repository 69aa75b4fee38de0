# graphlearn/services/catalog/store.py
from __future__ import annotations

import asyncio
import inspect
from typing import Dict, List, Optional, Sequence, Tuple

from graphlearn.common.logging import get_logger
from graphlearn.common.settings import get_settings
from graphlearn.domain.entities.material import Material
from graphlearn.domain.policies.material_filter import search_materials, unknown_categories
from graphlearn.domain.ports.material_source import MaterialSourcePort

logger = get_logger(__name__)

LOAD_ERROR_MESSAGES: Dict[str, str] = {
    "en": "Failed to load materials",
    "uk": "Не вдалося завантажити матеріали",
}
LOAD_ERROR_MESSAGE = LOAD_ERROR_MESSAGES["en"]


class CatalogStore:
    """
    Owns the canonical material collection and its load/error lifecycle.
    The store is the only writer; `materials` is handed out read-only.
    """

    def __init__(self, source: MaterialSourcePort, *, known_categories: Optional[Sequence[str]] = None,
                 strict_categories: Optional[bool] = None, locale: Optional[str] = None) -> None:
        cfg = get_settings()
        self._source = source
        self._known_categories: List[str] = (
            list(known_categories) if known_categories is not None else list(cfg.catalog.category_ids)
        )
        self._strict = cfg.catalog.strict_categories if strict_categories is None else strict_categories
        self._load_error = LOAD_ERROR_MESSAGES.get(locale or cfg.locale, LOAD_ERROR_MESSAGE)
        self._materials: Tuple[Material, ...] = ()
        self.is_loading: bool = False
        self.error: Optional[str] = None

    # ---------------- read side ----------------

    @property
    def materials(self) -> Tuple[Material, ...]:
        return self._materials

    @property
    def known_categories(self) -> List[str]:
        return list(self._known_categories)

    def get(self, material_id: str) -> Optional[Material]:
        for m in self._materials:
            if m.id == material_id:
                return m
        return None

    def search_materials(self, query: Optional[str]) -> Sequence[Material]:
        return search_materials(self._materials, query)

    # ---------------- lifecycle ----------------

    async def load(self) -> bool:
        """
        Fetch the collection from the source. On failure the previous
        collection is kept and `error` is set; there is no retry.
        """
        self.is_loading = True
        try:
            # let the presentation layer observe the loading state
            await asyncio.sleep(0)
            raw = self._source.list_materials()
            if inspect.isawaitable(raw):
                raw = await raw
            loaded = tuple(raw)
            self._validate(loaded)
        except Exception:
            logger.exception("catalog load failed; keeping %d previous materials", len(self._materials))
            self.error = self._load_error
            return False
        finally:
            self.is_loading = False

        self._materials = loaded
        self.error = None
        logger.info("catalog loaded: %d materials", len(loaded))
        return True

    def _validate(self, materials: Tuple[Material, ...]) -> None:
        seen: set[str] = set()
        for m in materials:
            if m.id in seen:
                raise ValueError(f"Duplicate material id: {m.id}")
            seen.add(m.id)

        unknown = unknown_categories(materials, self._known_categories)
        if unknown:
            if self._strict:
                raise ValueError(f"Unknown material categories: {', '.join(unknown)}")
            logger.warning("materials use categories with no filter label: %s", ", ".join(unknown))
