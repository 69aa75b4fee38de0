from __future__ import annotations
from enum import StrEnum

class ReviewLoadState(StrEnum):
    """Lifecycle of the review list for the currently open material."""
    idle = "idle"
    loading = "loading"
    loaded = "loaded"
    load_failed = "load_failed"
