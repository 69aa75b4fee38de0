"""Review backend talking to the comments endpoints over HTTP."""

from __future__ import annotations

from typing import Any, Callable, List, Optional
from urllib.parse import quote

import httpx

from graphlearn.common.logging import get_logger
from graphlearn.common.settings import get_settings
from graphlearn.domain.entities.review import Review
from graphlearn.domain.ports.identity import IdentityPort
from graphlearn.services.mappers.review import to_domain
from graphlearn.services.schemas.review import ReviewEnvelope, ReviewList

logger = get_logger(__name__)


class HttpReviewBackend:
    """HTTP client for the review (comments) API.

    Adds a bearer token when a token provider is configured and sends the
    signed-in user's display name along with new reviews.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        prefix: Optional[str] = None,
        timeout: Optional[float] = None,
        identity: Optional[IdentityPort] = None,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        cfg = get_settings()
        self.base_url = (base_url or cfg.reviews.base_url).rstrip("/")
        self.prefix = (prefix if prefix is not None else cfg.api.prefix).rstrip("/")
        self._identity = identity
        self._token_provider = token_provider
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else cfg.reviews.timeout_sec,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "HttpReviewBackend":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    def _path(self, material_id: str) -> str:
        return f"{self.prefix}/materials/{quote(material_id, safe='')}/comments"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self._token_provider() if self._token_provider else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s", method, path)
        response = await self._client.request(method, path, headers=self._headers(), **kwargs)
        response.raise_for_status()
        return response

    async def get_comments(self, material_id: str) -> List[Review]:
        """Fetch the reviews of one material, most recent first."""
        response = await self._request("GET", self._path(material_id))
        payload = ReviewList.model_validate(response.json())
        return [to_domain(item, material_id) for item in payload.comments]

    async def add_comment(self, material_id: str, text: str, rating: int) -> Review:
        """Create a review; the server assigns id and date."""
        body: dict[str, Any] = {"text": text, "rating": rating}
        if self._identity is not None and self._identity.current_user:
            body["authorName"] = self._identity.current_user
        response = await self._request("POST", self._path(material_id), json=body)
        payload = ReviewEnvelope.model_validate(response.json())
        return to_domain(payload.comment, material_id)
