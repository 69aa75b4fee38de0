# graphlearn/services/catalog/browser.py
from __future__ import annotations

from typing import List, Optional

from graphlearn.common.logging import get_logger
from graphlearn.common.settings import Settings, get_settings
from graphlearn.domain.dataclasses.listing import ListingResult
from graphlearn.domain.dataclasses.reviews import SubmitResult
from graphlearn.domain.entities.material import Material
from graphlearn.domain.enums.empty_reason import EmptyReason
from graphlearn.domain.enums.submit_status import SubmitStatus
from graphlearn.domain.policies.material_filter import (
    ALL_CATEGORIES,
    CategoryOption,
    category_options,
    filter_materials,
    recent_shortcuts,
)
from graphlearn.domain.ports.identity import IdentityPort
from graphlearn.domain.ports.notifications import NotificationPort
from graphlearn.domain.ports.presentation import ViewportPort
from graphlearn.services.assessments.registry import InMemoryAssessmentRegistry
from graphlearn.services.catalog.static_source import StaticMaterialSource
from graphlearn.services.catalog.store import CatalogStore
from graphlearn.services.navigation.controller import NavigationController
from graphlearn.services.reviews.http_backend import HttpReviewBackend
from graphlearn.services.reviews.memory_backend import InMemoryReviewBackend
from graphlearn.services.reviews.service import ReviewService

logger = get_logger(__name__)


class CatalogBrowser:
    """
    The learning-materials page: list filters, navigation and the review
    panel of the open material, wired together.

    Catalog store -> filter engine -> navigation (selection) -> reviews.
    Each piece keeps its own state; this class only sequences them.
    """

    def __init__(
        self,
        store: CatalogStore,
        navigation: NavigationController,
        reviews: ReviewService,
        *,
        locale: Optional[str] = None,
        recent_limit: Optional[int] = None,
    ) -> None:
        cfg = get_settings()
        self.store = store
        self.navigation = navigation
        self.reviews = reviews
        self.locale = locale or cfg.locale
        self.recent_limit = cfg.catalog.recent_limit if recent_limit is None else recent_limit
        self.search_term: str = ""
        self.category: str = ALL_CATEGORIES

    # ---------------- list view ----------------

    def set_search(self, term: Optional[str]) -> None:
        self.search_term = term or ""

    def set_category(self, category_id: Optional[str]) -> None:
        self.category = (category_id or ALL_CATEGORIES).strip() or ALL_CATEGORIES

    def categories(self) -> List[CategoryOption]:
        return category_options(self.store.known_categories, self.locale)

    def listing(self) -> ListingResult:
        everything = self.store.materials
        items = filter_materials(everything, self.search_term, self.category)
        if items:
            reason = EmptyReason.none
        elif not everything:
            reason = EmptyReason.no_materials
        else:
            reason = EmptyReason.no_matches
        return ListingResult(
            items=items,
            total=len(everything),
            query=self.search_term,
            category=self.category,
            empty_reason=reason,
        )

    def shortcuts(self) -> List[Material]:
        """Recently viewed strip: the head of the visible list."""
        return recent_shortcuts(self.listing().items, self.recent_limit)

    # ---------------- navigation ----------------

    async def open_material(self, material: Material) -> bool:
        """Show the detail view and (re)load its reviews from scratch."""
        self.navigation.select(material)
        return await self.reviews.open(material)

    async def open_material_by_id(self, material_id: str) -> bool:
        material = self.store.get(material_id)
        if material is None:
            logger.warning("cannot open unknown material %s", material_id)
            return False
        return await self.open_material(material)

    def back(self) -> None:
        self.navigation.back()
        self.reviews.detach()

    def take_assessment(self) -> bool:
        if not self.navigation.take_assessment():
            return False
        self.reviews.detach()
        return True

    # ---------------- reviews ----------------

    async def submit_review(self, text: Optional[str], rating: Optional[int]) -> SubmitResult:
        material = self.navigation.selected_material
        if material is None:
            logger.warning("review submitted with no material open")
            return SubmitResult(status=SubmitStatus.failed)
        return await self.reviews.submit_review(material.id, text, rating)

    def average_rating(self) -> Optional[float]:
        material = self.navigation.selected_material
        if material is None:
            return None
        return self.reviews.average_rating(material)


def build_browser(
    identity: IdentityPort,
    notifier: NotificationPort,
    *,
    viewport: Optional[ViewportPort] = None,
    settings: Optional[Settings] = None,
) -> CatalogBrowser:
    """Default wiring: bundled catalog + assessments, review backend from settings."""
    cfg = settings or get_settings()
    source = StaticMaterialSource()
    store = CatalogStore(
        source,
        known_categories=cfg.catalog.category_ids,
        strict_categories=cfg.catalog.strict_categories,
        locale=cfg.locale,
    )
    if cfg.reviews.backend == "http":
        backend = HttpReviewBackend(
            cfg.reviews.base_url,
            prefix=cfg.api.prefix,
            timeout=cfg.reviews.timeout_sec,
            identity=identity,
        )
    else:
        backend = InMemoryReviewBackend(
            material_ids=[m.id for m in source.list_materials()],
            identity=identity,
        )
    reviews = ReviewService(backend, identity, notifier, locale=cfg.locale, date_format=cfg.date_format)
    navigation = NavigationController(InMemoryAssessmentRegistry(), viewport)
    return CatalogBrowser(store, navigation, reviews, locale=cfg.locale, recent_limit=cfg.catalog.recent_limit)
