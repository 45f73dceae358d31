"""
Command-line interface utilities for pawyc.

This module provides logging configuration and the date parsing and
formatting shared by the pawyc commands.
"""

import logging
import re
from argparse import Namespace
from datetime import datetime, timezone
from typing import Any, Dict, Union

import click
import dateutil.parser

from ..logging import get_logger, set_log_level
from ..space_time.civil import CivilDateTime
from ..space_time.pythonic_datetimes import civil_from_datetime
from ..space_time.validation import validate_civil_date_time

logger = get_logger(__name__)

# Plain calendar dates, any (astronomical) year, optional time of day
_CIVIL_RE = re.compile(
    r"^(?P<year>[+-]?\d+)-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[T ](?P<hours>\d{1,2}):(?P<minutes>\d{2})(?::(?P<seconds>\d{1,2}(?:\.\d*)?))?)?$"
)


def configure_logging(args: Union[Dict[str, Any], Namespace]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line arguments (as a dictionary or Namespace)
    """
    if isinstance(args, dict):
        quiet = args.get("quiet", False)
        debug = args.get("debug", False)
        verbosity = args.get("verbose", 0)
    else:
        quiet = getattr(args, "quiet", False)
        debug = getattr(args, "debug", False)
        verbosity = getattr(args, "verbose", 0)

    if quiet:
        log_level = logging.ERROR
    elif debug:
        log_level = logging.DEBUG
    else:
        # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
        if verbosity == 0:
            log_level = logging.WARNING
        elif verbosity == 1:
            log_level = logging.INFO
        else:
            log_level = logging.DEBUG

    set_log_level(log_level)
    logger.debug(f"Logging configured with level {logging.getLevelName(log_level)}")


def parse_civil(date_str: str, utc_offset_hours: float = 0.0) -> CivilDateTime:
    """Parse a calendar date, optionally with a time of day.

    Accepts ``YYYY-MM-DD[THH:MM[:SS[.fff]]]`` for any year, including zero
    and negative astronomical years, and otherwise anything
    dateutil's ISO parser understands. A timezone in the string overrides
    utc_offset_hours.

    Raises:
        ValueError: If the string cannot be parsed
    """
    text = date_str.strip()
    match = _CIVIL_RE.match(text)
    if match:
        return CivilDateTime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hours") or 0),
            int(match.group("minutes") or 0),
            float(match.group("seconds") or 0.0),
            utc_offset_hours,
        )

    try:
        dt = dateutil.parser.isoparse(text)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Invalid date format: {date_str}") from e
    if dt.tzinfo is None:
        return civil_from_datetime(dt.replace(tzinfo=timezone.utc)).replace(
            utc_offset_hours=utc_offset_hours
        )
    return civil_from_datetime(dt)


def parse_date_input(date_str: str, utc_offset_hours: float = 0.0) -> Union[CivilDateTime, float]:
    """Parse date input in various formats.

    Args:
        date_str: Date string in various formats:
            - Julian date (e.g., "2460385.333333333")
            - calendar date with optional time (e.g., "1985-02-17T06:00:00")
            - ISO format with timezone (e.g., "2024-03-15T20:00:00+00:00")
            - "now"
        utc_offset_hours: UTC correction for dates without a timezone

    Returns:
        Either a CivilDateTime or a float (for Julian date)

    Raises:
        ValueError: If date string is invalid
    """
    if date_str.lower() == "now":
        return civil_from_datetime(datetime.now(timezone.utc))

    text = date_str.strip("' ")
    # A bare number is a Julian date; dates always contain a dash after the year
    if not _CIVIL_RE.match(text):
        try:
            return float(text)
        except ValueError:
            pass
    return parse_civil(text, utc_offset_hours)


def civil_option(date_str: str, utc_offset_hours: float = 0.0) -> CivilDateTime:
    """Parse and validate a civil date for a command, as click errors."""
    try:
        civil = parse_civil(date_str, utc_offset_hours)
        return validate_civil_date_time(civil)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def julian_or_civil_option(date_str: str) -> Union[CivilDateTime, float]:
    try:
        value = parse_date_input(date_str)
        if isinstance(value, CivilDateTime):
            validate_civil_date_time(value)
        return value
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def format_civil(civil: CivilDateTime) -> str:
    """Human readable rendering, e.g. ``1985-02-17 06:00:00.000 UT``."""
    text = (
        f"{civil.year:04d}-{civil.month:02d}-{civil.day:02d} "
        f"{civil.hours:02d}:{civil.minutes:02d}:{civil.seconds:06.3f}"
    )
    if civil.utc_offset_hours:
        return f"{text} (UT correction {civil.utc_offset_hours:+.4f} h)"
    return f"{text} UT"
