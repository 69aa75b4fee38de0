from __future__ import annotations
from enum import StrEnum

class SubmitStatus(StrEnum):
    accepted = "accepted"
    # client-side rejections, checked in this order; no request is sent
    unauthenticated = "unauthenticated"
    invalid_rating = "invalid_rating"
    empty_text = "empty_text"
    busy = "busy"
    # backend rejected or unreachable
    failed = "failed"
