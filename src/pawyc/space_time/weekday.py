"""Day of the week from a Julian Date (Section 6)."""

import math
from typing import Union

from ..constants import DAYS_PER_WEEK, WeekDay
from .civil import CivilDateTime
from .julian import JulianDate


def calculate_day_in_the_week(when: Union[JulianDate, CivilDateTime, float]) -> WeekDay:
    """Calculate the day of the week.

    The Julian Date is shifted by 1.5 days so that its integer part counts
    whole days from a Sunday midnight, then reduced modulo 7.

    Args:
        when: A JulianDate, a CivilDateTime or a Julian Date as a float

    Returns:
        WeekDay: Day of the week, SUN is zero
    """
    if isinstance(when, CivilDateTime):
        jd = JulianDate(when).decimal_days
    elif isinstance(when, JulianDate):
        jd = when.decimal_days
    else:
        jd = float(when)
    return WeekDay(math.floor(jd + 1.5) % DAYS_PER_WEEK)


def calculate_day_in_the_week_ymd(year: int, month: int, day: int) -> WeekDay:
    return calculate_day_in_the_week(CivilDateTime(year, month, day))
