"""Number formatting for dimension output."""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

MAX_DIGITS = 100


def to_fixed(value: float, digits: int = 0) -> str:
    """Format ``value`` with exactly ``digits`` decimals.

    Rounds the exact binary value half away from zero, so 2.5 -> "3" and
    53.974999999999994 -> "53.97".
    """
    if not 0 <= digits <= MAX_DIGITS:
        raise ValueError(f"digits must be between 0 and {MAX_DIGITS}, got {digits}")
    if not math.isfinite(value):
        return str(value)
    if value == 0:
        value = 0.0  # -0.0 formats as "0"
    with localcontext() as ctx:
        ctx.prec = 500  # room for 309 integer digits plus MAX_DIGITS decimals
        fixed = Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return f"{fixed:f}"


def format_number(value: float) -> str:
    """Shortest string for ``value``; integral floats drop the ".0"."""
    if math.isfinite(value) and value == int(value) and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
