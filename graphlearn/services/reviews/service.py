# graphlearn/services/reviews/service.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple, Union

from graphlearn.common.logging import get_logger
from graphlearn.common.settings import get_settings
from graphlearn.domain.dataclasses.reviews import ReviewDraft, SubmitResult
from graphlearn.domain.entities.material import Material
from graphlearn.domain.entities.review import Review, is_valid_rating
from graphlearn.domain.enums.notice_kind import NoticeKind
from graphlearn.domain.enums.review_load_state import ReviewLoadState
from graphlearn.domain.enums.submit_status import SubmitStatus
from graphlearn.domain.policies.rating import average_rating
from graphlearn.domain.policies.relative_time import format_relative
from graphlearn.domain.ports.identity import IdentityPort
from graphlearn.domain.ports.notifications import NotificationPort
from graphlearn.domain.ports.reviews import ReviewBackendPort

logger = get_logger(__name__)

_MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "load_failed": "Failed to load comments",
        "login_required": "Please sign in to leave a review",
        "rating_required": "Please choose a rating",
        "text_required": "Please write a review",
        "submitted": "Review submitted successfully!",
        "submit_failed": "Failed to submit the review. Please try again later.",
    },
    "uk": {
        "load_failed": "Не вдалося завантажити коментарі",
        "login_required": "Будь ласка, увійдіть в систему, щоб залишити відгук",
        "rating_required": "Будь ласка, виберіть рейтинг",
        "text_required": "Будь ласка, напишіть відгук",
        "submitted": "Відгук успішно надіслано!",
        "submit_failed": "Не вдалося надіслати відгук. Спробуйте пізніше.",
    },
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReviewService:
    """
    Reviews for the material currently open in the detail view.

    State per open material: idle -> loading -> (loaded | load_failed).
    Opening another material throws the old list away; nothing is cached.

    Every load is tagged with (material_id, sequence). A response is applied
    only if that tag still matches the open material and the latest load, so
    a slow answer for A can never overwrite the list shown for B.
    """

    def __init__(
        self,
        backend: ReviewBackendPort,
        identity: IdentityPort,
        notifier: NotificationPort,
        *,
        clock: Callable[[], datetime] = _utcnow,
        locale: Optional[str] = None,
        date_format: Optional[str] = None,
    ) -> None:
        cfg = get_settings()
        self._backend = backend
        self._identity = identity
        self._notifier = notifier
        self._clock = clock
        self._locale = locale or cfg.locale
        self._date_format = date_format or cfg.date_format
        self._messages = _MESSAGES.get(self._locale, _MESSAGES["en"])

        self._material: Optional[Material] = None
        self._reviews: List[Review] = []
        self._seq = 0
        # one detail-view instance per attach/detach; submissions belong to the view that started them
        self._view = 0
        self._submitting_view: Optional[int] = None
        self.state: ReviewLoadState = ReviewLoadState.idle
        self.draft: ReviewDraft = ReviewDraft()

    # ---------------- read side ----------------

    @property
    def material(self) -> Optional[Material]:
        return self._material

    @property
    def reviews(self) -> Tuple[Review, ...]:
        return tuple(self._reviews)

    @property
    def review_count(self) -> int:
        return len(self._reviews)

    @property
    def is_loading(self) -> bool:
        return self.state == ReviewLoadState.loading

    @property
    def is_submitting(self) -> bool:
        """True while a submission started from the current detail view is in flight."""
        return self._submitting_view is not None and self._submitting_view == self._view

    def average_rating(self, material: Optional[Material] = None) -> float:
        """
        Mean of the loaded ratings (one decimal) for the open material, or the
        material's seeded rating when nothing is loaded for it.
        """
        target = material or self._material
        if target is None:
            raise ValueError("average_rating needs a material when none is open")
        if self._material is None or target.id != self._material.id:
            return target.rating
        return average_rating((r.rating for r in self._reviews), default=target.rating)

    def format_date(self, timestamp: Union[datetime, str], now: Optional[datetime] = None) -> str:
        return format_relative(
            timestamp,
            now if now is not None else self._clock(),
            locale=self._locale,
            date_format=self._date_format,
        )

    # ---------------- view lifecycle ----------------

    def _reset_view(self, material: Optional[Material]) -> None:
        self._seq += 1
        self._view += 1
        self._submitting_view = None
        self._material = material
        self._reviews = []
        self.state = ReviewLoadState.idle
        self.draft = ReviewDraft()

    def attach(self, material: Material) -> None:
        """Bind to a freshly opened detail view; any previous list is discarded."""
        self._reset_view(material)

    def detach(self) -> None:
        """Detail view closed: reviews are not kept client-side."""
        self._reset_view(None)

    async def open(self, material: Material) -> bool:
        self.attach(material)
        return await self.load_reviews(material.id)

    def _is_current(self, material_id: str, seq: int) -> bool:
        return self._material is not None and self._material.id == material_id and self._seq == seq

    async def load_reviews(self, material_id: str) -> bool:
        """
        Replace the list with the backend's reviews for `material_id`.
        Failure empties the list and notifies; there is no retry.
        Returns True only when the result was applied.
        """
        if self._material is None or self._material.id != material_id:
            logger.warning("load_reviews(%s) ignored: material is not open", material_id)
            return False

        self._seq += 1
        seq = self._seq
        self._reviews = []
        self.state = ReviewLoadState.loading
        try:
            fetched = await self._backend.get_comments(material_id)
        except Exception:
            if not self._is_current(material_id, seq):
                logger.debug("dropping stale review load failure for %s", material_id)
                return False
            logger.exception("failed to load reviews for %s", material_id)
            self._reviews = []
            self.state = ReviewLoadState.load_failed
            self._notifier.notify(NoticeKind.error, self._messages["load_failed"])
            return False

        if not self._is_current(material_id, seq):
            logger.debug("dropping stale review list for %s (%d items)", material_id, len(fetched))
            return False

        # reviews accepted while this load was in flight stay on top
        fetched_ids = {r.id for r in fetched}
        accepted = [r for r in self._reviews if r.id not in fetched_ids]
        self._reviews = accepted + list(fetched)
        self.state = ReviewLoadState.loaded
        logger.info("loaded %d reviews for %s", len(self._reviews), material_id)
        return True

    # ---------------- submission ----------------

    def _reject(self, status: SubmitStatus, message_key: str) -> SubmitResult:
        logger.warning("review submission rejected: %s", status.value)
        self._notifier.notify(NoticeKind.warning, self._messages[message_key])
        return SubmitResult(status=status)

    async def submit_review(self, material_id: str, text: Optional[str], rating: Optional[int]) -> SubmitResult:
        """
        Validate (identity, then rating, then text) and send the review.
        Accepted reviews are prepended to the open list and the form resets;
        on failure the form keeps its contents so the user can retry.
        """
        text = text or ""
        rating = rating or 0
        self.draft = ReviewDraft(text=text, rating=rating)

        if self.is_submitting:
            logger.debug("submission already in flight for %s", material_id)
            return SubmitResult(status=SubmitStatus.busy)
        if not self._identity.is_authenticated:
            return self._reject(SubmitStatus.unauthenticated, "login_required")
        if not is_valid_rating(rating):
            return self._reject(SubmitStatus.invalid_rating, "rating_required")
        if not text.strip():
            return self._reject(SubmitStatus.empty_text, "text_required")

        view = self._view
        self._submitting_view = view
        try:
            review = await self._backend.add_comment(material_id, text.strip(), rating)
        except Exception:
            logger.exception("failed to submit review for %s", material_id)
            self._notifier.notify(NoticeKind.error, self._messages["submit_failed"])
            return SubmitResult(status=SubmitStatus.failed)
        finally:
            if self._submitting_view == view:
                self._submitting_view = None

        if self._view == view and self._material is not None and self._material.id == material_id:
            self._reviews.insert(0, review)
            self.draft = ReviewDraft()
        else:
            logger.debug("review %s saved after %s was closed; list left untouched", review.id, material_id)

        logger.info("review %s submitted for %s", review.id, material_id)
        self._notifier.notify(NoticeKind.success, self._messages["submitted"])
        return SubmitResult(status=SubmitStatus.accepted, review=review)
