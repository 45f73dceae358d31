"""CLI commands converting between calendar dates and Julian Dates."""

import click

from ..logging import get_logger
from ..space_time.julian import JulianDate, time_between
from ..space_time.rounding import round_civil_to_nearest_second
from .common import civil_option, format_civil, julian_or_civil_option

logger = get_logger(__name__)


@click.command()
@click.argument("date")
@click.option(
    "--offset",
    type=float,
    default=0.0,
    help="UT correction in hours added to the local time (e.g. -5 for UTC+5).",
)
def jd(date: str, offset: float) -> None:
    """Convert a calendar DATE (YYYY-MM-DD[THH:MM:SS]) to a Julian Date."""
    civil = civil_option(date, offset)
    julian_date = JulianDate(civil)
    logger.info(f"{civil} -> {julian_date.decimal_days}")
    click.echo(f"{julian_date.decimal_days:.6f}")


@click.command()
@click.argument("julian_date", type=float)
@click.option(
    "--exact",
    is_flag=True,
    help="Print the seconds as computed instead of rounding to the nearest second.",
)
@click.option(
    "--raw",
    is_flag=True,
    help="Print every field of the converted date and time.",
)
def calendar(julian_date: float, exact: bool, raw: bool) -> None:
    """Convert a JULIAN_DATE to a calendar date and time in UT."""
    civil = JulianDate(julian_date).to_civil_date_time()
    if not exact:
        civil = round_civil_to_nearest_second(civil)
    logger.info(f"{julian_date} -> {civil}")
    click.echo(str(civil) if raw else format_civil(civil))


@click.command()
@click.argument("value")
def mjd(value: str) -> None:
    """Modified Julian Date of a Julian Date or calendar date VALUE."""
    julian_date = JulianDate(julian_or_civil_option(value))
    click.echo(f"{julian_date.modified_julian_date:.6f}")


@click.command()
@click.argument("later")
@click.argument("earlier")
def diff(later: str, earlier: str) -> None:
    """Days elapsed from EARLIER to LATER (Julian Dates or calendar dates)."""
    difference = time_between(
        JulianDate(julian_or_civil_option(later)),
        JulianDate(julian_or_civil_option(earlier)),
    )
    click.echo(f"{difference.decimal_day_difference:.6f}")
