"""Bridges between pawyc value types and the standard datetime module.

datetime only covers years 1 to 9999 of the proleptic Gregorian calendar,
so these helpers are for modern dates. The conversions themselves use the
Section 4 and 5 algorithms, so dates before the Gregorian reform come out
in the Julian calendar, as pawyc treats them everywhere else.
"""

from datetime import datetime, timedelta, timezone

import pytz

from ..constants import MINUTES_IN_HOUR, SECONDS_IN_DAY, SECONDS_IN_HOUR
from ..errors import NaiveDateTimeError
from ..logging import get_logger
from .civil import CivilDateTime
from .julian import JulianDate, TimeDifference
from .julian_calc import civil_to_julian_date, julian_date_to_civil
from .rounding import create_and_round_to_millisecond

logger = get_logger(__name__)


def ensure_utc(dt: datetime) -> datetime:
    """Convert datetime to UTC if it has a timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: UTC datetime

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    if dt.tzinfo is None:
        raise NaiveDateTimeError("Datetime must have timezone info")
    return dt.astimezone(timezone.utc)


def civil_from_datetime(dt: datetime) -> CivilDateTime:
    """Convert an aware datetime to a CivilDateTime in its own local time.

    The datetime's ISO offset is negated into a UTC correction, so
    10:00+02:00 becomes 10:00 with utc_offset_hours=-2.0.

    Raises:
        NaiveDateTimeError: If datetime is naive
    """
    offset = dt.utcoffset()
    if offset is None:
        raise NaiveDateTimeError("Datetime must have timezone info")
    return CivilDateTime(
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second + dt.microsecond / 1_000_000,
        -offset.total_seconds() / SECONDS_IN_HOUR,
    )


def datetime_from_civil(civil: CivilDateTime) -> datetime:
    """Convert a CivilDateTime to an aware datetime, rounded to the millisecond.

    The UTC correction becomes a pytz.FixedOffset, which only holds whole
    minutes; finer corrections are rounded.
    """
    offset_minutes = -civil.utc_offset_hours * MINUTES_IN_HOUR
    if offset_minutes != round(offset_minutes):
        logger.debug(
            f"Rounding UTC correction of {civil.utc_offset_hours} hours to whole minutes"
        )
    if round(offset_minutes) == 0:
        tz = pytz.UTC
    else:
        tz = pytz.FixedOffset(round(offset_minutes))

    whole_seconds = int(civil.seconds)
    microseconds = (civil.seconds - whole_seconds) * 1_000_000
    # Counted from the 1st, so day 0 is the last day of the previous month
    dt = create_and_round_to_millisecond(
        microseconds,
        whole_seconds,
        civil.minutes,
        civil.hours,
        1,
        civil.month,
        civil.year,
        tzinfo=tz,
    )
    return dt + timedelta(days=civil.day - 1)


def julian_from_datetime(dt: datetime) -> float:
    """Convert an aware datetime to a Julian Date.

    Args:
        dt: Datetime to convert

    Returns:
        float: Julian date
    """
    return civil_to_julian_date(civil_from_datetime(dt))


def julian_to_datetime(jd: float) -> datetime:
    """Convert a Julian Date to a UTC datetime, rounded to the millisecond.

    Args:
        jd: Julian date to convert

    Returns:
        datetime: Datetime
    """
    return datetime_from_civil(julian_date_to_civil(jd))


def julian_date_from_datetime(dt: datetime) -> JulianDate:
    return JulianDate(civil_from_datetime(dt))


def timedelta_from_time_difference(difference: TimeDifference) -> timedelta:
    return timedelta(days=difference.decimal_day_difference)


def time_difference_from_timedelta(delta: timedelta) -> TimeDifference:
    return TimeDifference(delta.total_seconds() / SECONDS_IN_DAY)
