# graphlearn/services/notifications/log_sink.py
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List

from graphlearn.common.logging import get_logger
from graphlearn.domain.enums.notice_kind import NoticeKind

logger = get_logger(__name__)

_LEVELS = {
    NoticeKind.error: logging.ERROR,
    NoticeKind.warning: logging.WARNING,
    NoticeKind.success: logging.INFO,
}


@dataclass(frozen=True)
class Notice:
    kind: NoticeKind
    message: str


class LoggingNotificationSink:
    """
    Notification sink that logs every notice and keeps the most recent ones
    so a UI (or a test) can show them. Fire-and-forget for callers.
    """

    def __init__(self, maxlen: int = 50) -> None:
        self._notices: Deque[Notice] = deque(maxlen=maxlen)

    def notify(self, kind: NoticeKind, message: str) -> None:
        kind = NoticeKind(kind)
        self._notices.append(Notice(kind=kind, message=message))
        logger.log(_LEVELS[kind], "[%s] %s", kind.value, message)

    @property
    def notices(self) -> List[Notice]:
        return list(self._notices)

    def last(self) -> Notice | None:
        return self._notices[-1] if self._notices else None

    def clear(self) -> None:
        self._notices.clear()
