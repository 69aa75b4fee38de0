from __future__ import annotations

from typing import Optional


class StaticIdentity:
    """
    Minimal identity provider: a display name when signed in, None otherwise.
    Real sign-in lives outside this package; this adapter just mirrors it.
    """

    def __init__(self, user: Optional[str] = None) -> None:
        self._user = user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def current_user(self) -> Optional[str]:
        return self._user

    def sign_in(self, user: str) -> None:
        if not user or not user.strip():
            raise ValueError("user display name is required")
        self._user = user.strip()

    def sign_out(self) -> None:
        self._user = None
