"""Calendar predicates and simple time calculations.

Implements Sections 3, 7 and 8 of "Practical Astronomy With Your
Calculator", together with the leap year rules of the Gregorian calendar.
None of these functions clip or validate their inputs.
"""

from typing import Tuple

from ..constants import (
    AVG_DAYS_PER_MONTH,
    DAYS_IN_NONLEAP_YEAR,
    MINUTES_IN_HOUR,
    Month,
    SECONDS_IN_HOUR,
    SECONDS_IN_MINUTE,
)
from .division import quotient_and_remainder, truncate


def _divisible(year: int, divisor: int) -> bool:
    return quotient_and_remainder(year, divisor)[1] == 0


def is_leap_year(year: int) -> bool:
    """Return True if year is a leap year in the Gregorian calendar.

    A year is a leap year if it is divisible by 4, except century years,
    which are leap years only when divisible by 400.

    Args:
        year: Year in the Gregorian calendar

    Returns:
        bool: Whether the year has 366 days
    """
    return _divisible(year, 4) and (not _divisible(year, 100) or _divisible(year, 400))


def days_in_year(year: int) -> int:
    """Number of days in a Gregorian calendar year, 365 or 366."""
    if is_leap_year(year):
        return DAYS_IN_NONLEAP_YEAR + 1
    return DAYS_IN_NONLEAP_YEAR


def calculate_day_number(year: int, month: int, day: int) -> int:
    """Day number within the year (Routine R1 of Section 3).

    January 1st is day number 1. Day zero is allowed and is the last day of
    the previous year, as used by epochs such as 1990 January 0.0.

    Args:
        year: Year, used only for the leap year test
        month: Month (1-12)
        day: Day of the month

    Returns:
        int: Day number within the year
    """
    multiplicand = 62 if is_leap_year(year) else 63

    if month > Month.FEB:
        day_number = truncate(AVG_DAYS_PER_MONTH * (month + 1)) - multiplicand
    else:
        day_number = truncate((month - 1) * multiplicand / 2)
    return day_number + day


def calculate_decimal_hours(hours: int, minutes: int, seconds: float) -> float:
    """Convert hours, minutes and seconds to decimal hours (Section 7).

    The components are not clipped, so ``(3, -50, 300)`` gives 2.25.
    """
    return float(hours) + minutes / MINUTES_IN_HOUR + seconds / SECONDS_IN_HOUR


def calculate_hours_minutes_and_seconds(decimal_hours: float) -> Tuple[int, int, float]:
    """Convert decimal hours to hours, minutes and seconds (Section 8).

    Each component is truncated toward zero, so negative input yields a
    triple with a consistent sign: -5.11 hours is (-5, -6, -36.0).

    Args:
        decimal_hours: Input decimal hours

    Returns:
        Tuple[int, int, float]: Hours, minutes in +/-[0, 59] and
        seconds in +/-[0, 60)
    """
    hours = truncate(decimal_hours)
    minutes_fraction = MINUTES_IN_HOUR * (decimal_hours - hours)
    minutes = truncate(minutes_fraction)
    seconds = SECONDS_IN_MINUTE * (minutes_fraction - minutes)
    return hours, minutes, seconds


def convert_bce_year(bce_year: int) -> int:
    """Convert a year BC/BCE into astronomical year numbering.

    There is no year zero between 1 BCE and 1 CE, so 1 BCE becomes year 0
    and 4713 BCE becomes -4712 (Section 4).

    Raises:
        ValueError: If bce_year is less than 1
    """
    if bce_year < 1:
        raise ValueError(f"BCE years start at 1, got {bce_year}")
    return -(bce_year - 1)
