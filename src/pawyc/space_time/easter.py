"""Date of Easter (Section 2).

Uses the method published in Butcher's Ecclesiastical Calendar of 1876,
also known as the Meeus/Jones/Butcher or "Anonymous Gregorian" algorithm.
"""

from typing import Tuple

from ..constants import YEARS_IN_CENTURY
from .division import quotient_and_remainder

# Length of the Metonic cycle
YEAR_DIVISOR = 19


def calculate_easter(year: int) -> Tuple[int, int]:
    """Calculate the date of Easter Sunday.

    Only valid for years of the Gregorian calendar, from 1583 onwards.
    Earlier years are not rejected but give meaningless dates.

    Args:
        year: Year in the Gregorian calendar

    Returns:
        Tuple[int, int]: Month (3 or 4) and day of the month
    """
    _, a = quotient_and_remainder(year, YEAR_DIVISOR)
    b, c = quotient_and_remainder(year, YEARS_IN_CENTURY)
    d, e = quotient_and_remainder(b, 4)
    f, _ = quotient_and_remainder(b + 8, 25)
    g, _ = quotient_and_remainder(b - f + 1, 3)
    _, h = quotient_and_remainder(19 * a + b - d - g + 15, 30)
    i, k = quotient_and_remainder(c, 4)
    _, l = quotient_and_remainder(32 + 2 * (e + i) - h - k, 7)  # noqa: E741
    m, _ = quotient_and_remainder(a + 11 * h + 22 * l, 451)
    n, p = quotient_and_remainder(h + l - 7 * m + 114, 31)
    return n, p + 1
