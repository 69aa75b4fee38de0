from __future__ import annotations
from enum import StrEnum

class NoticeKind(StrEnum):
    error = "error"
    warning = "warning"
    success = "success"
