from datetime import datetime, timedelta, tzinfo as TzInfo
from typing import Optional

import pytz

from ..constants import HOURS_IN_DAY, MINUTES_IN_HOUR, SECONDS_IN_MINUTE
from .civil import CivilDateTime
from .julian_calc import civil_to_julian_date, julian_date_to_civil


def create_and_round_to_millisecond(
    microseconds: float,
    second: int,
    minute: int,
    hour: int,
    day: int,
    month: int,
    year: int,
    tzinfo: Optional[TzInfo] = None,
) -> datetime:
    """Round microseconds to nearest millisecond and normalize all time units."""
    # Round microseconds to nearest millisecond
    rounded_micros = round(microseconds / 1000) * 1000

    # Handle microsecond overflow before creating datetime
    extra_seconds = rounded_micros // 1_000_000
    normalized_micros = rounded_micros % 1_000_000

    # A leap second is carried into the next minute
    if second >= SECONDS_IN_MINUTE:
        extra_seconds += second - SECONDS_IN_MINUTE + 1
        second = SECONDS_IN_MINUTE - 1

    dt = datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        int(normalized_micros),
        tzinfo=tzinfo if tzinfo is not None else pytz.UTC,
    )

    # Add any excess seconds
    if extra_seconds:
        dt += timedelta(seconds=extra_seconds)

    return dt


def round_civil_to_nearest_second(civil: CivilDateTime) -> CivilDateTime:
    """Round the seconds of a civil date and time, carrying into the date.

    The inverse Julian Date conversion tends to produce times such as
    05:59:59.99998; this turns them into 06:00:00. Works for any year,
    including those datetime cannot represent.
    """
    second = round(civil.seconds)
    minute = civil.minutes
    hour = civil.hours
    # Carry upwards, as for microseconds in create_and_round_to_millisecond
    if second >= SECONDS_IN_MINUTE:
        second -= SECONDS_IN_MINUTE
        minute += 1
        if minute >= MINUTES_IN_HOUR:
            minute = 0
            hour += 1
    if hour < HOURS_IN_DAY:
        return civil.replace(hours=hour, minutes=minute, seconds=float(second))

    # Rolled past midnight, let the Julian Date find the next calendar day
    midnight = CivilDateTime(civil.year, civil.month, civil.day)
    next_day = julian_date_to_civil(civil_to_julian_date(midnight) + 1)
    return CivilDateTime(
        next_day.year,
        next_day.month,
        next_day.day,
        hour - HOURS_IN_DAY,
        minute,
        float(second),
        civil.utc_offset_hours,
    )
