from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

_ONE_PLACE = Decimal("0.1")


def average_rating(ratings: Iterable[int], default: float) -> float:
    """
    Mean of the given ratings rounded half-up to one decimal place.
    Falls back to `default` (the material's seeded rating) when there are none.
    """
    values = list(ratings)
    if not values:
        return default
    mean = Decimal(sum(values)) / Decimal(len(values))
    return float(mean.quantize(_ONE_PLACE, rounding=ROUND_HALF_UP))
