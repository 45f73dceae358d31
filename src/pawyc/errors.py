"""Exceptions raised by pawyc.

The conversion routines themselves never raise; these are used by the
opt-in validation layer, the datetime bridges and the CLI.
"""

from typing import Sequence


class PawycError(Exception):
    """Base class for pawyc errors."""

    pass


class NaiveDateTimeError(PawycError, ValueError):
    """Raised when a datetime object has no timezone info."""

    pass


class InvalidCivilDateTimeError(PawycError, ValueError):
    """Raised when a civil date or time has fields outside their ranges."""

    def __init__(self, problems: Sequence[str]):
        self.problems = list(problems)
        super().__init__("Invalid civil date/time: " + "; ".join(self.problems))
