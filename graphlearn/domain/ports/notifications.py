from __future__ import annotations
from typing import Protocol
from graphlearn.domain.enums.notice_kind import NoticeKind

class NotificationPort(Protocol):
    def notify(self, kind: NoticeKind, message: str) -> None: ...
