"""
Rounding helpers for money and display values.

Python's built-in round() is banker's rounding (round(0.5) == 0), which would
silently shift unit prices that land on .5 KRW. Everything price-related goes
through round_half_up instead.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext


def round_half_up(value: float, digits: int = 0):
    """
    Round to `digits` decimal places, ties away from zero.

    Returns an int when digits == 0, otherwise a float.
    The float is converted to Decimal exactly (no repr round-trip), so a value
    stored as 2.4999999... still rounds down. Any finite float is accepted;
    infinity and NaN raise ValueError.
    """
    exact = Decimal(value)
    if not exact.is_finite():
        raise ValueError(f"Cannot round non-finite value {value!r}")

    with localcontext() as ctx:
        # every integer digit, the kept decimals, and one for a carry
        ctx.prec = max(ctx.prec, exact.adjusted() + digits + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    if digits == 0:
        return int(rounded)
    return float(rounded)
