"""Civil date and time value types.

These are simple containers: they are not calendar aware,
make no distinction between the Julian and Gregorian calendars, and never
normalise or range-check their fields. See validation.py for opt-in checks.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any

from ..constants import HOURS_IN_DAY, MINUTES_IN_DAY, SECONDS_IN_DAY


def _day_fraction(hours: int, minutes: int, seconds: float, utc_offset_hours: float) -> float:
    fraction = (
        hours / HOURS_IN_DAY + minutes / MINUTES_IN_DAY + seconds / SECONDS_IN_DAY
    )
    return fraction + utc_offset_hours / HOURS_IN_DAY


@dataclass(frozen=True, eq=False)
class CivilDate:
    """A year, month and day with lexicographic ordering."""

    year: int = 0
    month: int = 0
    day: int = 0

    def _key(self):
        return (self.year, self.month, self.day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "CivilDate") -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return self._key() < other._key()

    def __gt__(self, other: "CivilDate") -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return other < self

    def __le__(self, other: "CivilDate") -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return not other < self

    def __ge__(self, other: "CivilDate") -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return not self < other

    def __str__(self) -> str:
        return f"CivilDate{{ year={self.year} month={self.month} day={self.day} }}"


@dataclass(frozen=True, eq=False)
class CivilTime:
    """A time of day with an offset from UTC in decimal hours.

    Ordering uses the UTC-corrected day fraction only; equality needs every
    field to match.
    """

    hours: int = 0
    minutes: int = 0
    seconds: float = 0.0
    utc_offset_hours: float = 0.0

    @property
    def day_fraction(self) -> float:
        """Time within the day as a fraction of a day, corrected to UTC."""
        return _day_fraction(self.hours, self.minutes, self.seconds, self.utc_offset_hours)

    def _key(self):
        return (self.hours, self.minutes, self.seconds, self.utc_offset_hours)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "CivilTime") -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return self.day_fraction < other.day_fraction

    def __gt__(self, other: "CivilTime") -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return other < self

    def __le__(self, other: "CivilTime") -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return not other < self

    def __ge__(self, other: "CivilTime") -> bool:
        if not isinstance(other, CivilTime):
            return NotImplemented
        return not self < other

    def __str__(self) -> str:
        return (
            f"CivilTime{{ hours={self.hours} minutes={self.minutes}"
            f" seconds={self.seconds:.6f} utc_offset_hours={self.utc_offset_hours:.4f} }}"
        )


@dataclass(frozen=True, eq=False)
class CivilDateTime:
    """A calendar date and time of day with an offset from UTC.

    Args:
        year: Year, no constraints. Use convert_bce_year for years BC/BCE.
        month: Month of the year, 1..12
        day: Day of the month, 0..31. Zero is the last day of the
            previous month, as used by epochs such as 1990 January 0.0.
        hours: Hours after midnight on a 24-hour clock, 0..23
        minutes: Minutes into the hour, 0..59
        seconds: Seconds into the minute, 0..60 (60 for a leap second)
        utc_offset_hours: Correction from local time to UTC in decimal
            hours, -12..12. UT is local time plus this value, so
            06:07:11 with -2.0 is 04:07:11 UT. This is the negative of an
            ISO 8601 offset.

    Two instances are equal only if all seven fields are equal. Ordering
    compares year, month and day, then the UTC-corrected day fraction, so
    instances that differ only in how the same day fraction is made up are
    neither less, greater nor equal to each other.
    """

    year: int = 0
    month: int = 0
    day: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: float = 0.0
    utc_offset_hours: float = 0.0

    @property
    def day_fraction(self) -> float:
        """Time within the day as a fraction of a day, corrected to UTC.

        At 08:00:00 with a zero offset this is 0.333333; at 06:00:00 with
        an offset of -12 hours it is -0.25, which is technically the
        previous day.
        """
        return _day_fraction(self.hours, self.minutes, self.seconds, self.utc_offset_hours)

    @property
    def date(self) -> CivilDate:
        return CivilDate(self.year, self.month, self.day)

    @property
    def time(self) -> CivilTime:
        return CivilTime(self.hours, self.minutes, self.seconds, self.utc_offset_hours)

    def replace(self, **changes: Any) -> "CivilDateTime":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def _key(self):
        return (
            self.year,
            self.month,
            self.day,
            self.hours,
            self.minutes,
            self.seconds,
            self.utc_offset_hours,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "CivilDateTime") -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        if self.year != other.year:
            return self.year < other.year
        if self.month != other.month:
            return self.month < other.month
        if self.day != other.day:
            return self.day < other.day
        return self.day_fraction < other.day_fraction

    def __gt__(self, other: "CivilDateTime") -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        return other < self

    def __le__(self, other: "CivilDateTime") -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        return not other < self

    def __ge__(self, other: "CivilDateTime") -> bool:
        if not isinstance(other, CivilDateTime):
            return NotImplemented
        return not self < other

    def __str__(self) -> str:
        return (
            f"CivilDateTime{{ year={self.year} month={self.month} day={self.day}"
            f" hours={self.hours} minutes={self.minutes}"
            f" seconds={self.seconds:.6f} utc_offset_hours={self.utc_offset_hours:.4f} }}"
        )
