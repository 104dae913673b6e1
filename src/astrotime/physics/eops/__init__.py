"""Earth orientation parameters (EOP), as published daily by the IERS.

Time conversions only use :attr:`.EarthOrientationParameter.delta_ut1`. Polar motion, nutation
corrections and length of day are kept so a full celestrak record is available to callers.
"""

# Standard Library Imports
import datetime
from dataclasses import dataclass

# Local Imports
from ...common.exceptions import DataRangeError


@dataclass(frozen=True)
class EarthOrientationParameter:
    """One daily EOP record, valid at 0h UTC of :attr:`date`."""

    date: datetime.date
    """datetime.date: UTC date of the record."""

    x_p: float
    """float: polar motion along x, radians."""

    y_p: float
    """float: polar motion along y, radians."""

    d_delta_psi: float
    """float: nutation in longitude correction, radians."""

    d_delta_eps: float
    """float: nutation in obliquity correction, radians."""

    delta_ut1: float
    """float: UT1 - UTC, seconds."""

    length_of_day: float
    """float: excess length of day, seconds."""

    delta_atomic_time: int
    """int: TAI - UTC, whole seconds."""


class MissingEOP(DataRangeError):  # noqa: N818
    """No EOP record is tabulated for the requested date."""


# Local Imports
from .getter import (  # noqa: F401, E402
    getEarthOrientationParameters,
    getEOPLoader,
    setEarthOrientationParameters,
    ut1MinusUtc,
)
