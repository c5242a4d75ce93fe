"""Currency rounding."""

from __future__ import annotations

import math


def round_currency(amount: float) -> float:
    """Round to cents, half away from zero, after scaling by 100.

    Scaling happens in binary floating point, so values such as 2.675
    (stored as 2.67499...) round down exactly like ``Math.round`` would.
    Non-finite amounts, and amounts whose scaled value overflows, are
    returned unchanged.
    """
    scaled = abs(amount) * 100
    if not math.isfinite(scaled):
        return amount
    return math.copysign(math.floor(scaled + 0.5), amount) / 100
