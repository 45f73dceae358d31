"""CLI commands for the small calendar calculations."""

import click

from ..constants import Month
from ..space_time.calendar import (
    calculate_day_number,
    calculate_decimal_hours,
    calculate_hours_minutes_and_seconds,
    days_in_year,
    is_leap_year,
)
from ..space_time.easter import calculate_easter
from ..space_time.weekday import calculate_day_in_the_week
from .common import civil_option

# Lets negative numbers through as arguments instead of options
_NUMERIC_ARGS = {"ignore_unknown_options": True}


@click.command()
@click.argument("year", type=int)
def easter(year: int) -> None:
    """Date of Easter Sunday in a Gregorian calendar YEAR."""
    if year < 1583:
        click.echo(f"Warning: {year} is before the Gregorian calendar", err=True)
    month, day = calculate_easter(year)
    click.echo(f"{year:04d}-{month:02d}-{day:02d} ({Month(month)} {day})")


@click.command()
@click.argument("date")
def weekday(date: str) -> None:
    """Day of the week of a calendar DATE."""
    civil = civil_option(date)
    click.echo(str(calculate_day_in_the_week(civil)))


@click.command()
@click.argument("date")
def daynumber(date: str) -> None:
    """Day number of DATE within its year (January 1st is 1)."""
    civil = civil_option(date)
    click.echo(str(calculate_day_number(civil.year, civil.month, civil.day)))


@click.command()
@click.argument("year", type=int)
def leap(year: int) -> None:
    """Whether YEAR is a Gregorian leap year, and its length in days."""
    answer = "leap year" if is_leap_year(year) else "common year"
    click.echo(f"{year}: {answer}, {days_in_year(year)} days")


@click.command(context_settings=_NUMERIC_ARGS)
@click.argument("decimal_hours", type=float)
def hms(decimal_hours: float) -> None:
    """Split DECIMAL_HOURS into hours, minutes and seconds."""
    hours, minutes, seconds = calculate_hours_minutes_and_seconds(decimal_hours)
    click.echo(f"{hours} {minutes} {seconds:.6f}")


@click.command(context_settings=_NUMERIC_ARGS)
@click.argument("hours", type=int)
@click.argument("minutes", type=int)
@click.argument("seconds", type=float)
def hours(hours: int, minutes: int, seconds: float) -> None:
    """Combine HOURS, MINUTES and SECONDS into decimal hours."""
    click.echo(f"{calculate_decimal_hours(hours, minutes, seconds):.9f}")
