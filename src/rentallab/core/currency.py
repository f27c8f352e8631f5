"""
Display rounding for currency amounts.

Running state in the engine stays unrounded; rounding only happens when a
value is placed into a record's display fields.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal, localcontext
from enum import Enum


class RoundingPolicy(Enum):
    """Rounding policies for currency display values."""

    BANKERS = ROUND_HALF_EVEN
    HALF_UP = ROUND_HALF_UP  # half away from zero


def round_currency(
    value: float, policy: RoundingPolicy = RoundingPolicy.HALF_UP
) -> float:
    """
    Round an amount to whole currency units.

    Args:
        value: Amount to round
        policy: Rounding policy for ties (default: half away from zero)

    Returns:
        Rounded amount as float. NaN and infinities are returned unchanged.

    Example:
        >>> round_currency(2.5)
        3.0
        >>> round_currency(-2.5)
        -3.0
    """
    if not math.isfinite(value):
        return value
    # Wide enough for every integer digit of the largest finite float
    with localcontext() as ctx:
        ctx.prec = 400
        quantized = Decimal(str(value)).quantize(Decimal("1"), rounding=policy.value)
    return float(quantized)
