from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator does (2.5 -> 3), not banker's rounding."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def mean_or_none(values: Sequence[float], digits: int = 1) -> Optional[float]:
    if not values:
        return None
    return round_half_up(sum(values) / len(values), digits)
