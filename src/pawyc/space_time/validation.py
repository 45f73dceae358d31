"""Opt-in range checks for civil dates and times.

The conversion routines accept anything and produce deterministic but
meaningless results for out-of-range fields. Callers that want to reject
such input can run it through validate_civil_date_time first.
"""

from typing import List, Union

from ..errors import InvalidCivilDateTimeError
from ..logging import get_logger
from .civil import CivilDate, CivilDateTime, CivilTime

logger = get_logger(__name__)

# Inclusive ranges per field
MONTH_RANGE = (1, 12)
DAY_RANGE = (0, 31)
HOURS_RANGE = (0, 23)
MINUTES_RANGE = (0, 59)
SECONDS_RANGE = (0.0, 60.0)
UTC_OFFSET_RANGE = (-12.0, 12.0)


def _check(problems: List[str], name: str, value: float, bounds) -> None:
    low, high = bounds
    if not low <= value <= high:
        problems.append(f"{name}={value} outside [{low}, {high}]")


def find_problems(value: Union[CivilDate, CivilTime, CivilDateTime]) -> List[str]:
    """List the fields of a civil value that lie outside their ranges."""
    problems: List[str] = []
    if isinstance(value, (CivilDate, CivilDateTime)):
        _check(problems, "month", value.month, MONTH_RANGE)
        _check(problems, "day", value.day, DAY_RANGE)
    if isinstance(value, (CivilTime, CivilDateTime)):
        _check(problems, "hours", value.hours, HOURS_RANGE)
        _check(problems, "minutes", value.minutes, MINUTES_RANGE)
        _check(problems, "seconds", value.seconds, SECONDS_RANGE)
        _check(problems, "utc_offset_hours", value.utc_offset_hours, UTC_OFFSET_RANGE)
    return problems


def is_valid_civil_date_time(value: Union[CivilDate, CivilTime, CivilDateTime]) -> bool:
    return not find_problems(value)


def validate_civil_date_time(value):
    """Return value unchanged if all of its fields are in range.

    Args:
        value: A CivilDateTime, CivilDate or CivilTime

    Returns:
        The input value

    Raises:
        InvalidCivilDateTimeError: Naming every offending field
    """
    problems = find_problems(value)
    if problems:
        logger.debug(f"Rejecting {value}: {problems}")
        raise InvalidCivilDateTimeError(problems)
    return value
