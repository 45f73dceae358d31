"""CLI entry point for pawyc."""

import click

from .convert import jd, calendar, mjd, diff
from .calendar_cmds import easter, weekday, daynumber, leap, hms, hours
from . import common
from ..logging import get_logger


# Create a logger for this module
logger = get_logger(__name__)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv, -vvv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Calendar and Julian Date calculations."""
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")


cli.add_command(jd)
cli.add_command(calendar)
cli.add_command(mjd)
cli.add_command(diff)
cli.add_command(easter)
cli.add_command(weekday)
cli.add_command(daynumber)
cli.add_command(leap)
cli.add_command(hms)
cli.add_command(hours)

if __name__ == "__main__":
    cli()
