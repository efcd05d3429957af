from __future__ import annotations

import math
import operator
from decimal import ROUND_HALF_UP, Decimal, localcontext

# Fixed-point formatting switches to exponent notation from here on.
FIXED_FORMAT_LIMIT = 1e21
MAX_DECIMALS = 100


def _fraction_digits(decimals) -> int:
    """Coerce ``decimals`` to an int the way fixed-point formatting does.

    Integers (including numpy integers) are used as is, other numbers are
    truncated toward zero and NaN counts as 0.
    """
    if isinstance(decimals, (str, bytes)) or decimals is None:
        raise ValueError(f"decimals must be a number, got {decimals!r}")
    try:
        digits = operator.index(decimals)
    except TypeError:
        try:
            d = float(decimals)
        except (TypeError, ValueError):
            raise ValueError(f"decimals must be a number, got {decimals!r}") from None
        if math.isnan(d):
            digits = 0
        elif math.isinf(d):
            raise ValueError(f"decimals must be between 0 and {MAX_DECIMALS}, got {decimals}")
        else:
            digits = math.trunc(d)
    if not 0 <= digits <= MAX_DECIMALS:
        raise ValueError(f"decimals must be between 0 and {MAX_DECIMALS}, got {decimals}")
    return digits


def round_fixed(value: float, decimals: int = 2) -> float:
    """Round ``value`` to ``decimals`` places the way fixed-point formatting does.

    The exact binary value of the float is rounded with ties going away from
    zero, then parsed back into a float. ``round_fixed(1.005, 2)`` is 1.0
    because 1.005 is stored as 1.00499999..., while ``round_fixed(2.5, 0)`` is
    3.0 (the builtin ``round`` would give 2).

    - NaN and infinities are returned unchanged
    - Magnitudes of 1e21 and above are returned unchanged
    - Fractional decimals are truncated (2.9 means 2)
    - Raises ValueError if decimals is not a number or falls outside [0, 100]
    """
    digits = _fraction_digits(decimals)

    value = float(value)
    if not math.isfinite(value) or abs(value) >= FIXED_FORMAT_LIMIT:
        return value

    with localcontext() as ctx:
        ctx.prec = 200
        quantum = Decimal(1).scaleb(-digits)
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
