from __future__ import annotations
from typing import Protocol

class ViewportPort(Protocol):
    def scroll_to_top(self) -> None: ...
