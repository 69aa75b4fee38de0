from __future__ import annotations
from typing import Optional, Protocol

class IdentityPort(Protocol):
    @property
    def is_authenticated(self) -> bool: ...

    @property
    def current_user(self) -> Optional[str]: ...
