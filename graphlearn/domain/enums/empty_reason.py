from __future__ import annotations
from enum import StrEnum

class EmptyReason(StrEnum):
    none = "none"
    no_materials = "no_materials"
    no_matches = "no_matches"
