"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
import datetime

# astrotime Imports
from astrotime.physics.eops import EarthOrientationParameter
from astrotime.physics.time.leap_seconds import LeapSecondEntry

# Leap second boundaries of the bundled table
LEAP_DAY = datetime.date(2016, 12, 31)
"""datetime.date: UTC day ending with the positive leap second that brought TAI - UTC to 37 s."""

DAY_BEFORE_LEAP_DAY = datetime.date(2016, 12, 30)
"""datetime.date: ordinary UTC day preceding :data:`.LEAP_DAY`."""

# Synthetic tables, injected through a TimeContext
SYNTHETIC_LEAP_ENTRIES: tuple[LeapSecondEntry, ...] = (
    LeapSecondEntry(datetime.date(2015, 7, 1), 36),
    LeapSecondEntry(datetime.date(2017, 1, 1), 37),
    LeapSecondEntry(datetime.date(2030, 7, 1), 36),
)
"""tuple[LeapSecondEntry]: real 2015-2017 leap seconds, followed by a fictitious negative leap second."""

NEGATIVE_LEAP_DAY = datetime.date(2030, 6, 30)
"""datetime.date: UTC day of :data:`.SYNTHETIC_LEAP_ENTRIES` ending with a negative leap second."""

SYNTHETIC_VALID_UNTIL = datetime.date(2035, 12, 31)
"""datetime.date: expiry date of the synthetic leap second table."""


def buildEOP(eop_date: datetime.date, delta_ut1: float, delta_atomic_time: int) -> EarthOrientationParameter:
    """Build an EOP record where only UT1 - UTC and TAI - UTC matter."""
    return EarthOrientationParameter(
        date=eop_date,
        x_p=0.0,
        y_p=0.0,
        d_delta_psi=0.0,
        d_delta_eps=0.0,
        delta_ut1=delta_ut1,
        length_of_day=0.001,
        delta_atomic_time=delta_atomic_time,
    )


SYNTHETIC_EOPS: tuple[EarthOrientationParameter, ...] = (
    buildEOP(datetime.date(2016, 12, 30), -0.4078, 36),
    buildEOP(datetime.date(2016, 12, 31), -0.4084, 36),
    buildEOP(datetime.date(2017, 1, 1), 0.5916, 37),
    buildEOP(datetime.date(2017, 1, 2), 0.5910, 37),
)
"""tuple[EarthOrientationParameter]: UT1 - UTC around the 2016 leap second, which it jumps by 1 s."""
