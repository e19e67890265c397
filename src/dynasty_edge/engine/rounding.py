"""Half-up rounding for display values."""

from __future__ import annotations

import math
from typing import Optional


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator rather than to the nearest even digit."""

    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_optional(value: Optional[float], digits: int = 1) -> Optional[float]:
    return None if value is None else round_half_up(value, digits)
