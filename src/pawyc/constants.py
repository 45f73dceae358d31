"""Time-related constants used by the PAWYC calendar routines.

Section numbers refer to "Practical Astronomy With Your Calculator".
"""

from enum import IntEnum
from typing import Tuple

YEARS_IN_CENTURY = 100
DAYS_IN_NONLEAP_YEAR = 365

HOURS_IN_DAY = 24
MINUTES_IN_HOUR = 60
SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = SECONDS_IN_MINUTE * MINUTES_IN_HOUR
SECONDS_IN_DAY = SECONDS_IN_HOUR * HOURS_IN_DAY
MINUTES_IN_DAY = MINUTES_IN_HOUR * HOURS_IN_DAY

# Section 4
DAYS_IN_JULIAN_YEAR = 365.25

# Section 1
DAYS_IN_GREGORIAN_YEAR = 365.2425
DAYS_IN_GREGORIAN_CENTURY = DAYS_IN_GREGORIAN_YEAR * YEARS_IN_CENTURY

# Zero point of the Modified Julian Date, 1858-11-17 00:00:00 UT
MJD_EPOCH = 2400000.5

# Section 5: last day of the Julian calendar, 1582-10-14 12:00:00 UT
LAST_DAY_OF_JULIAN_CALENDAR = 2299160

# Section 5: 0400-02-29 18:00:00 UT, origin not given in PAWYC
JULIAN_CONVERSION_CONSTANT = 1867216.25

# Average length of the months March through December (306 days / 10).
# Stands in for 30.6001, which only older calculators needed.
AVG_DAYS_PER_MONTH = 30.6

# Table 2b: days before the start of each month in a leap year
DAYSTART_LEAPYEAR: Tuple[int, ...] = (
    0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335,
)

DAYS_PER_WEEK = 7

# First instant handled with the Gregorian correction is strictly after this
GREGORIAN_REFORM_DATE = (1582, 10, 15)

# Base of the calendar -> Julian Date conversion (Section 4)
JULIAN_DATE_BASE = 1720994.5


class Month(IntEnum):
    """Months of the year, January is one."""

    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12

    def __str__(self) -> str:
        return self.name


class WeekDay(IntEnum):
    """Days of the week, Sunday is zero."""

    SUN = 0
    MON = 1
    TUE = 2
    WED = 3
    THU = 4
    FRI = 5
    SAT = 6

    def __str__(self) -> str:
        return self.name
