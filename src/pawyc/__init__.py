"""pawyc public API.

Calendar and Julian Date arithmetic after "Practical Astronomy With Your
Calculator". Most users only need the names re-exported here.
"""

from .constants import Month, WeekDay
from .errors import InvalidCivilDateTimeError, NaiveDateTimeError, PawycError
from .space_time.calendar import (
    calculate_day_number,
    calculate_decimal_hours,
    calculate_hours_minutes_and_seconds,
    convert_bce_year,
    days_in_year,
    is_leap_year,
)
from .space_time.civil import CivilDate, CivilDateTime, CivilTime
from .space_time.division import integer_and_fraction, quotient_and_remainder
from .space_time.easter import calculate_easter
from .space_time.julian import JulianDate, TimeDifference, time_between
from .space_time.julian_calc import civil_to_julian_date, julian_date_to_civil
from .space_time.validation import is_valid_civil_date_time, validate_civil_date_time
from .space_time.weekday import calculate_day_in_the_week, calculate_day_in_the_week_ymd

__version__ = "0.1.0"

__all__ = [
    "CivilDate",
    "CivilDateTime",
    "CivilTime",
    "InvalidCivilDateTimeError",
    "JulianDate",
    "Month",
    "NaiveDateTimeError",
    "PawycError",
    "TimeDifference",
    "WeekDay",
    "calculate_day_in_the_week",
    "calculate_day_in_the_week_ymd",
    "calculate_day_number",
    "calculate_decimal_hours",
    "calculate_easter",
    "calculate_hours_minutes_and_seconds",
    "civil_to_julian_date",
    "convert_bce_year",
    "days_in_year",
    "integer_and_fraction",
    "is_leap_year",
    "is_valid_civil_date_time",
    "julian_date_to_civil",
    "quotient_and_remainder",
    "time_between",
    "validate_civil_date_time",
]
