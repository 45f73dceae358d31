"""Tests for the bridges to Python datetime objects."""

import unittest
from datetime import datetime, timedelta, timezone

import pytz

from pawyc.errors import NaiveDateTimeError, PawycError
from pawyc.space_time.civil import CivilDateTime
from pawyc.space_time.julian import JulianDate, TimeDifference
from pawyc.space_time.pythonic_datetimes import (
    civil_from_datetime,
    datetime_from_civil,
    ensure_utc,
    julian_date_from_datetime,
    julian_from_datetime,
    julian_to_datetime,
    time_difference_from_timedelta,
    timedelta_from_time_difference,
)


class TestEnsureUtc(unittest.TestCase):
    def test_converts_to_utc(self):
        dt = datetime(2025, 3, 19, 19, 0, tzinfo=pytz.FixedOffset(120))
        self.assertEqual(
            ensure_utc(dt), datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc)
        )
        self.assertEqual(ensure_utc(dt).utcoffset(), timedelta(0))

    def test_naive_datetime(self):
        with self.assertRaises(NaiveDateTimeError):
            ensure_utc(datetime(2025, 3, 19, 17, 0))


class TestCivilFromDatetime(unittest.TestCase):
    def test_utc(self):
        civil = civil_from_datetime(datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc))
        self.assertEqual(civil, CivilDateTime(2025, 3, 19, 17, 0, 0.0, 0.0))

    def test_offset_is_negated(self):
        """An ISO offset of +02:00 is a UT correction of -2 hours."""
        dt = datetime(2025, 3, 19, 10, 0, tzinfo=pytz.FixedOffset(120))
        civil = civil_from_datetime(dt)
        self.assertEqual(civil.hours, 10)
        self.assertEqual(civil.utc_offset_hours, -2.0)

    def test_microseconds(self):
        dt = datetime(2025, 3, 19, 17, 0, 1, 250000, tzinfo=timezone.utc)
        self.assertEqual(civil_from_datetime(dt).seconds, 1.25)

    def test_naive_datetime(self):
        with self.assertRaises(NaiveDateTimeError):
            civil_from_datetime(datetime(2025, 3, 19, 17, 0))
        with self.assertRaises(PawycError):
            civil_from_datetime(datetime(2025, 3, 19, 17, 0))


class TestDatetimeFromCivil(unittest.TestCase):
    def test_utc(self):
        dt = datetime_from_civil(CivilDateTime(2025, 3, 19, 17, 0, 30.1234))
        self.assertIs(dt.tzinfo, pytz.UTC)
        self.assertEqual(dt, datetime(2025, 3, 19, 17, 0, 30, 123000, tzinfo=timezone.utc))

    def test_utc_correction_becomes_offset(self):
        dt = datetime_from_civil(CivilDateTime(2025, 3, 19, 10, 0, 0.0, -2.0))
        self.assertEqual(dt.hour, 10)
        self.assertEqual(dt.utcoffset(), timedelta(hours=2))
        self.assertEqual(dt, datetime(2025, 3, 19, 8, 0, tzinfo=timezone.utc))

    def test_leap_second(self):
        dt = datetime_from_civil(CivilDateTime(2016, 12, 31, 23, 59, 60.0))
        self.assertEqual(dt, datetime(2017, 1, 1, 0, 0, 0, tzinfo=timezone.utc))

    def test_day_zero(self):
        """Day 0 is the last day of the previous month."""
        self.assertEqual(
            datetime_from_civil(CivilDateTime(1990, 1, 0)),
            datetime(1989, 12, 31, tzinfo=pytz.UTC),
        )
        self.assertEqual(
            datetime_from_civil(CivilDateTime(2024, 3, 0, 6, 30, 0.0)),
            datetime(2024, 2, 29, 6, 30, tzinfo=pytz.UTC),
        )

    def test_day_zero_keeps_offset(self):
        dt = datetime_from_civil(CivilDateTime(1990, 1, 0, 10, 0, 0.0, -2.0))
        self.assertEqual(dt.utcoffset(), timedelta(hours=2))
        self.assertEqual(dt, datetime(1989, 12, 31, 8, 0, tzinfo=timezone.utc))

    def test_round_trip(self):
        dt = datetime(2024, 3, 15, 20, 0, 0, 500000, tzinfo=pytz.FixedOffset(-300))
        self.assertEqual(datetime_from_civil(civil_from_datetime(dt)), dt)


class TestJulianBridges(unittest.TestCase):
    def test_julian_from_datetime(self):
        dt = datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc)
        self.assertAlmostEqual(julian_from_datetime(dt), 2460754.208333333, places=6)

    def test_julian_from_datetime_with_offset(self):
        local = datetime(2025, 3, 19, 19, 0, tzinfo=pytz.FixedOffset(120))
        universal = datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc)
        self.assertAlmostEqual(
            julian_from_datetime(local), julian_from_datetime(universal), places=7
        )

    def test_julian_to_datetime(self):
        self.assertEqual(
            julian_to_datetime(2451545.0), datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
        )
        self.assertEqual(
            julian_to_datetime(2460754.208333333),
            datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc),
        )

    def test_julian_date_from_datetime(self):
        jd = julian_date_from_datetime(datetime(1985, 2, 17, 6, tzinfo=timezone.utc))
        self.assertIsInstance(jd, JulianDate)
        self.assertAlmostEqual(jd.decimal_days, 2446113.75, places=9)


class TestTimeDifferenceBridges(unittest.TestCase):
    def test_to_timedelta(self):
        self.assertEqual(timedelta_from_time_difference(TimeDifference(1.5)), timedelta(days=1.5))

    def test_from_timedelta(self):
        self.assertEqual(
            time_difference_from_timedelta(timedelta(hours=12)).decimal_day_difference, 0.5
        )
        self.assertEqual(
            time_difference_from_timedelta(timedelta(days=-30)).decimal_day_difference, -30.0
        )


if __name__ == "__main__":
    unittest.main()
