"""Read-only collaborators consulted by time scale conversions.

Leap second and Earth orientation tables are loaded once and only read afterwards. Rather than
reaching for them globally, every conversion that may need them takes a :class:`.TimeContext`,
so synthetic tables can be swapped in without touching configuration.
"""

from __future__ import annotations

# Standard Library Imports
import datetime
from dataclasses import dataclass
from typing import TYPE_CHECKING

# Local Imports
from ...common.exceptions import MissingLeapSecond
from ..eops import MissingEOP, getEOPLoader
from .leap_seconds import getLeapSecondLoader

if TYPE_CHECKING:
    # Local Imports
    from ..eops.loaders import EOPLoader
    from .leap_seconds.loaders import LeapSecondLoader


@dataclass(frozen=True)
class TimeContext:
    """Bundle of the tables a time scale conversion may consult."""

    leap_seconds: LeapSecondLoader
    """:class:`.LeapSecondLoader`: source of TAI - UTC."""

    eops: EOPLoader | None = None
    """:class:`.EOPLoader`: source of UT1 - UTC, ``None`` if UT1 isn't needed."""

    def leapSecondOffset(self, leap_date: datetime.date) -> int:
        """Return TAI - UTC (seconds) valid during the UTC day `leap_date`.

        Raises:
            MissingLeapSecond: If the table has no entry valid for `leap_date`.
        """
        return self.leap_seconds.leapSecondOffset(leap_date)

    def leapAtMidnight(self, leap_date: datetime.date) -> int:
        """Return the change of TAI - UTC (seconds) at the midnight ending the UTC day `leap_date`.

        A table that stops covering dates after `leap_date` announces no leap second there.

        Raises:
            MissingLeapSecond: If the table has no entry valid for `leap_date`.
        """
        count = self.leapSecondOffset(leap_date)
        try:
            return self.leapSecondOffset(leap_date + datetime.timedelta(days=1)) - count
        except MissingLeapSecond:
            return 0

    def ut1MinusUtc(self, eop_date: datetime.date, fraction_of_day: float = 0.0) -> float:
        """Return UT1 - UTC (seconds) at `fraction_of_day` of the UTC day `eop_date`.

        Raises:
            MissingEOP: If there is no EOP source or it doesn't cover `eop_date`.
        """
        if self.eops is None:
            raise MissingEOP(f"No EOP source available to compute UT1 - UTC on {eop_date}")
        return self.eops.ut1MinusUtc(eop_date, fraction_of_day)


def getDefaultContext() -> TimeContext:
    """Return a :class:`.TimeContext` built from the configured loaders.

    Loaders are memoized by their getters, so repeated calls share the loaded tables.
    """
    return TimeContext(leap_seconds=getLeapSecondLoader(), eops=getEOPLoader())


def resolveContext(context: TimeContext | None) -> TimeContext:
    """Return `context`, or the configured default when it is ``None``."""
    if context is None:
        return getDefaultContext()
    return context
