"""Julian Date and time difference value types.

A JulianDate is a continuous count of days since noon on Monday,
January 1, 4713 BC of the proleptic Julian calendar. Subtracting two of them
gives a TimeDifference, the only arithmetic combination with a physical
meaning; a TimeDifference can in turn be added to or subtracted from a
JulianDate.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Union

from ..constants import HOURS_IN_DAY, MJD_EPOCH, SECONDS_IN_DAY
from .civil import CivilDateTime
from .julian_calc import civil_to_julian_date, julian_date_to_civil


@dataclass
class TimeDifference:
    """Time elapsed between two instants, in decimal days.

    Storing days limits the precision for Julian Date differences to
    about 1e-9 days.
    """

    decimal_day_difference: float = 0.0

    @property
    def hours(self) -> float:
        return self.decimal_day_difference * HOURS_IN_DAY

    @property
    def seconds(self) -> float:
        return self.decimal_day_difference * SECONDS_IN_DAY

    def __neg__(self) -> "TimeDifference":
        return TimeDifference(-self.decimal_day_difference)


@total_ordering
class JulianDate:
    """An astronomical Julian Date.

    Args:
        value: Either decimal days since the start of the Julian Period
            (1985-02-17 06:00:00 UT is 2446113.75) or a CivilDateTime to
            convert. Defaults to zero.
    """

    __slots__ = ("_decimal_days",)

    def __init__(self, value: Union[float, CivilDateTime] = 0.0):
        if isinstance(value, CivilDateTime):
            self._decimal_days = civil_to_julian_date(value)
        else:
            self._decimal_days = float(value)

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int,
        hours: int = 0,
        minutes: int = 0,
        seconds: float = 0.0,
        utc_offset_hours: float = 0.0,
    ) -> "JulianDate":
        """Build a JulianDate from civil date and time fields."""
        return cls(
            CivilDateTime(year, month, day, hours, minutes, seconds, utc_offset_hours)
        )

    @property
    def decimal_days(self) -> float:
        return self._decimal_days

    @property
    def modified_julian_date(self) -> float:
        """The Julian Date minus 2400000.5."""
        return self._decimal_days - MJD_EPOCH

    def to_civil_date_time(self) -> CivilDateTime:
        """The civil date and time of this Julian Date, in UTC."""
        return julian_date_to_civil(self._decimal_days)

    def __sub__(self, other):
        if isinstance(other, JulianDate):
            return TimeDifference(self._decimal_days - other._decimal_days)
        if isinstance(other, TimeDifference):
            return JulianDate(self._decimal_days - other.decimal_day_difference)
        return NotImplemented

    def __add__(self, other):
        if isinstance(other, TimeDifference):
            return JulianDate(self._decimal_days + other.decimal_day_difference)
        return NotImplemented

    def __isub__(self, other):
        if isinstance(other, TimeDifference):
            self._decimal_days -= other.decimal_day_difference
            return self
        return NotImplemented

    def __iadd__(self, other):
        if isinstance(other, TimeDifference):
            self._decimal_days += other.decimal_day_difference
            return self
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self._decimal_days == other._decimal_days

    def __lt__(self, other: "JulianDate") -> bool:
        if not isinstance(other, JulianDate):
            return NotImplemented
        return self._decimal_days < other._decimal_days

    # Mutable through += and -=
    __hash__ = None  # type: ignore[assignment]

    def __float__(self) -> float:
        return self._decimal_days

    def __repr__(self) -> str:
        return f"JulianDate({self._decimal_days!r})"


def time_between(
    later: Union[JulianDate, CivilDateTime], earlier: Union[JulianDate, CivilDateTime]
) -> TimeDifference:
    """Time elapsed from earlier to later.

    Civil dates are converted to Julian Dates first, which is far simpler
    than counting days through the calendar.
    """
    if isinstance(later, CivilDateTime):
        later = JulianDate(later)
    if isinstance(earlier, CivilDateTime):
        earlier = JulianDate(earlier)
    return later - earlier
