"""Leap second table package."""

# Standard Library Imports
import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class LeapSecondEntry:
    """Data class defining one row of the leap second table."""

    date: datetime.date
    """datetime.date: UTC date from whose midnight :attr:`tai_minus_utc` applies."""

    tai_minus_utc: int
    """int: accumulated difference TAI - UTC (seconds)."""


# Local Imports
# forward-facing API import
from ....common.exceptions import MissingLeapSecond  # noqa: F401, E402
from .getter import getLeapSecondLoader, leapSecondOffset  # noqa: F401, E402
