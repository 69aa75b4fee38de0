from __future__ import annotations
from enum import StrEnum

class MaterialType(StrEnum):
    article = "article"
    video = "video"
    tutorial = "tutorial"
