"""Julian Date calculation module.

This module converts between civil dates and times and Julian Dates using
the algorithms of Sections 4 and 5 of "Practical Astronomy With Your
Calculator". Dates on or before 1582-10-15 00:00:00 are taken to be in the
proleptic Julian calendar, later dates in the Gregorian calendar.

The two directions are not exact inverses: the intermediate truncations
limit a round trip to roughly 1e-4 days.
"""

from ..constants import (
    AVG_DAYS_PER_MONTH,
    DAYS_IN_GREGORIAN_CENTURY,
    DAYS_IN_JULIAN_YEAR,
    GREGORIAN_REFORM_DATE,
    HOURS_IN_DAY,
    JULIAN_CONVERSION_CONSTANT,
    JULIAN_DATE_BASE,
    LAST_DAY_OF_JULIAN_CALENDAR,
    Month,
    YEARS_IN_CENTURY,
)
from .calendar import calculate_hours_minutes_and_seconds
from .civil import CivilDateTime
from .division import integer_and_fraction, truncate

GREGORIAN_REFORM = CivilDateTime(*GREGORIAN_REFORM_DATE)

# Constants of unknown origin from Section 5
_OFFSET_C = 1524
_OFFSET_D = 122.1
_MONTH_SPLIT = 13.5
_YEAR_SPLIT = 2.5

# Section 4, applied to negative years only
_NEGATIVE_YEAR_CORRECTION = 0.75


def is_gregorian(dt: CivilDateTime) -> bool:
    """Whether dt falls strictly after the start of the Gregorian calendar."""
    return dt > GREGORIAN_REFORM


def civil_to_julian_date(dt: CivilDateTime) -> float:
    """Convert a civil date and time to a Julian Date (Section 4).

    Args:
        dt: Civil date and time; its UTC offset is folded into the result

    Returns:
        float: Julian Date in decimal days
    """
    # Decide the calendar before the year and month are shifted
    gregorian = is_gregorian(dt)

    year = dt.year
    month = dt.month
    # January and February count as months 13 and 14 of the previous year
    if month < Month.MAR:
        year -= 1
        month += 12

    b = 0
    if gregorian:
        a = truncate(year / YEARS_IN_CENTURY)
        b = 2 - a + truncate(a / 4)

    if year < 0:
        c = truncate(DAYS_IN_JULIAN_YEAR * year - _NEGATIVE_YEAR_CORRECTION)
    else:
        c = truncate(DAYS_IN_JULIAN_YEAR * year)

    d = truncate(AVG_DAYS_PER_MONTH * (month + 1))

    return float(b + c + d + dt.day) + dt.day_fraction + JULIAN_DATE_BASE


def julian_date_to_civil(jd: float) -> CivilDateTime:
    """Convert a Julian Date to a civil date and time in UTC (Section 5).

    Returns a full civil date and time rather than a decimal day. For Julian
    Dates before LAST_DAY_OF_JULIAN_CALENDAR the result is a Julian
    calendar date.

    Args:
        jd: Julian Date in decimal days

    Returns:
        CivilDateTime: The date and time, with a zero UTC offset
    """
    value_i, value_f = integer_and_fraction(jd + 0.5)

    if value_i >= LAST_DAY_OF_JULIAN_CALENDAR:
        value_a, _ = integer_and_fraction(
            (value_i - JULIAN_CONVERSION_CONSTANT) / DAYS_IN_GREGORIAN_CENTURY
        )
        quarter_a, _ = integer_and_fraction(0.25 * value_a)
        value_b = value_i + 1 + value_a - quarter_a
    else:
        value_b = value_i

    value_c = value_b + _OFFSET_C
    value_d, _ = integer_and_fraction((value_c - _OFFSET_D) / DAYS_IN_JULIAN_YEAR)
    value_e, _ = integer_and_fraction(DAYS_IN_JULIAN_YEAR * value_d)
    value_g, _ = integer_and_fraction((value_c - value_e) / AVG_DAYS_PER_MONTH)

    month_days, _ = integer_and_fraction(AVG_DAYS_PER_MONTH * value_g)
    decimal_days = value_c - value_e + value_f - month_days

    whole_days, day_fraction = integer_and_fraction(decimal_days)
    hours, minutes, seconds = calculate_hours_minutes_and_seconds(
        day_fraction * HOURS_IN_DAY
    )

    if value_g < _MONTH_SPLIT:
        month = int(value_g) - 1
    else:
        month = int(value_g) - 13

    if month > _YEAR_SPLIT:
        year = int(value_d) - 4716
    else:
        year = int(value_d) - 4715

    return CivilDateTime(year, month, int(whole_days), hours, minutes, seconds, 0.0)
