"""Integer division helpers shared by the calendar routines.

The two helpers round in opposite directions and both behaviours are
relied upon: quotient_and_remainder truncates toward zero (the integer
division PAWYC's Easter and day-number formulas assume), while
integer_and_fraction floors so that the fractional part is never negative.
"""

import math
from typing import Tuple


def truncate(value: float) -> int:
    """Drop the fractional part of value, rounding toward zero."""
    return int(value)


def quotient_and_remainder(dividend: int, divisor: int) -> Tuple[int, int]:
    """Divide two integers, truncating the quotient toward zero.

    Unlike Python's ``divmod`` the remainder takes the sign of the dividend:
    ``quotient_and_remainder(-23, 4) == (-5, -3)``.

    Args:
        dividend: Number to be divided
        divisor: Number to divide by

    Returns:
        Tuple[int, int]: Quotient and remainder

    Raises:
        ZeroDivisionError: If divisor is zero
    """
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    remainder = dividend - quotient * divisor
    return quotient, remainder


def integer_and_fraction(value: float) -> Tuple[float, float]:
    """Split a real number into floor(value) and a non-negative fraction.

    Args:
        value: Real number to split

    Returns:
        Tuple[float, float]: Integer part and fractional part, e.g.
        ``-3.25 -> (-4.0, 0.75)``
    """
    integer_part = float(math.floor(value))
    return integer_part, value - integer_part
