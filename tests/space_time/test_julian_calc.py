"""Tests for the civil date to Julian Date conversions."""

import unittest

from pawyc.space_time.civil import CivilDate, CivilDateTime
from pawyc.space_time.julian_calc import (
    GREGORIAN_REFORM,
    civil_to_julian_date,
    is_gregorian,
    julian_date_to_civil,
)

# Accuracy of a civil -> Julian Date -> civil round trip
ROUND_TRIP_DAYS = 1e-4


class TestCivilToJulianDate(unittest.TestCase):
    """Civil date and time to Julian Date."""

    def test_known_dates(self):
        self.assertAlmostEqual(
            civil_to_julian_date(CivilDateTime(1985, 2, 17, 6)), 2446113.75, places=9
        )
        self.assertAlmostEqual(
            civil_to_julian_date(CivilDateTime(2009, 6, 19, 18)), 2455002.25, places=9
        )
        self.assertAlmostEqual(
            civil_to_julian_date(CivilDateTime(2000, 1, 1, 12)), 2451545.0, places=9
        )

    def test_julian_calendar_date(self):
        """Dates before the reform use the Julian calendar."""
        self.assertAlmostEqual(
            civil_to_julian_date(CivilDateTime(1507, 3, 12, 12)), 2271560.0, places=9
        )

    def test_start_of_julian_period(self):
        """Noon on 1 January 4713 BC (year -4712) is Julian Date zero."""
        self.assertAlmostEqual(
            civil_to_julian_date(CivilDateTime(-4712, 1, 1, 12)), 0.0, places=9
        )
        self.assertAlmostEqual(
            civil_to_julian_date(CivilDateTime(-4712, 3, 1)), 59.5, places=9
        )

    def test_day_zero_epoch(self):
        """1990 January 0.0 is the last instant of 1989."""
        self.assertAlmostEqual(
            civil_to_julian_date(CivilDateTime(1990, 1, 0)), 2447891.5, places=9
        )
        self.assertAlmostEqual(
            civil_to_julian_date(CivilDateTime(1989, 12, 31)), 2447891.5, places=9
        )

    def test_utc_offset_is_added(self):
        """06:07:11 with a correction of -2 hours is 04:07:11 UT."""
        local = civil_to_julian_date(CivilDateTime(2018, 10, 1, 6, 7, 11.0, -2.0))
        universal = civil_to_julian_date(CivilDateTime(2018, 10, 1, 4, 7, 11.0, 0.0))
        self.assertAlmostEqual(local, universal, places=7)

    def test_increasing_through_calendar_change(self):
        """4 October 1582 (Julian) is followed by 15 October 1582 (Gregorian)."""
        last_julian = civil_to_julian_date(CivilDateTime(1582, 10, 4, 12))
        first_gregorian = civil_to_julian_date(CivilDateTime(1582, 10, 15, 12))
        self.assertAlmostEqual(last_julian, 2299160.0, places=9)
        self.assertAlmostEqual(first_gregorian - last_julian, 1.0, places=9)


class TestGregorianBoundary(unittest.TestCase):
    def test_reform_instant_is_julian(self):
        self.assertEqual(GREGORIAN_REFORM, CivilDateTime(1582, 10, 15))
        self.assertFalse(is_gregorian(CivilDateTime(1582, 10, 15)))

    def test_after_reform_is_gregorian(self):
        self.assertTrue(is_gregorian(CivilDateTime(1582, 10, 15, 0, 0, 1.0)))
        self.assertTrue(is_gregorian(CivilDateTime(2000, 1, 1)))
        self.assertFalse(is_gregorian(CivilDateTime(1582, 10, 4, 23, 59, 59.0)))
        self.assertFalse(is_gregorian(CivilDateTime(-4712, 1, 1)))


class TestJulianDateToCivil(unittest.TestCase):
    """Julian Date to civil date and time."""

    def assertCivilClose(self, actual, expected):
        self.assertEqual(
            (actual.year, actual.month, actual.day),
            (expected.year, expected.month, expected.day),
        )
        difference = abs(civil_to_julian_date(actual) - civil_to_julian_date(expected))
        self.assertLess(difference, ROUND_TRIP_DAYS)

    def test_known_dates(self):
        self.assertCivilClose(
            julian_date_to_civil(2458489.75), CivilDateTime(2019, 1, 6, 6)
        )
        self.assertCivilClose(
            julian_date_to_civil(2446113.75), CivilDateTime(1985, 2, 17, 6)
        )

    def test_exact_fields(self):
        civil = julian_date_to_civil(2451545.0)
        self.assertEqual(civil, CivilDateTime(2000, 1, 1, 12, 0, 0.0, 0.0))

    def test_result_is_utc(self):
        self.assertEqual(julian_date_to_civil(2446113.75).utc_offset_hours, 0.0)

    def test_calendar_change(self):
        self.assertEqual(julian_date_to_civil(2299160.5).date, CivilDate(1582, 10, 15))
        self.assertEqual(julian_date_to_civil(2299158.5).date, CivilDate(1582, 10, 3))

    def test_transition_day_reads_as_gregorian(self):
        """Integer part 2299160 already takes the Gregorian correction."""
        self.assertEqual(julian_date_to_civil(2299159.5).date, CivilDate(1582, 10, 14))

    def test_julian_calendar(self):
        self.assertCivilClose(
            julian_date_to_civil(2271560.0), CivilDateTime(1507, 3, 12, 12)
        )

    def test_negative_year(self):
        civil = julian_date_to_civil(1684592.5)
        self.assertEqual((civil.year, civil.month, civil.day), (-100, 3, 1))

    def test_round_trips(self):
        cases = [
            CivilDateTime(1985, 2, 17, 6),
            CivilDateTime(1970, 1, 1),
            CivilDateTime(1999, 12, 31, 23, 59, 59.0),
            CivilDateTime(2038, 1, 19, 3, 14, 7.0),
            CivilDateTime(1600, 2, 29, 12),
            CivilDateTime(1000, 7, 4, 6, 30),
            CivilDateTime(-100, 3, 1),
        ]
        for civil in cases:
            with self.subTest(civil=str(civil)):
                self.assertCivilClose(
                    julian_date_to_civil(civil_to_julian_date(civil)), civil
                )


if __name__ == "__main__":
    unittest.main()
