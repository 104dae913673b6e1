"""Global time keeping constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to objects and classes remain in those files.

References:
    #. IERS Conventions (2010), Chapter 10
    #. IAU 2006 Resolution B3
"""

from __future__ import annotations

# Third Party Imports
from numpy import iinfo, int64, pi

# Conversion constants
TWOPI = 2.0 * pi
DEG2RAD = pi / 180.0
ARCSEC2RAD = DEG2RAD / 3600.0

SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 60.0 * 60.0
SECONDS_PER_DAY = 60.0 * 60.0 * 24.0
SECONDS_PER_YEAR = SECONDS_PER_DAY * 365.25
SECONDS_PER_CENTURY = SECONDS_PER_YEAR * 100.0
DAYS_PER_YEAR = 365.25
DAYS_PER_CENTURY = 365.25 * 100.0
DAYS_PER_MILLENNIUM = 365250.0

# Integer versions used for whole-second arithmetic
INT_SECONDS_PER_MINUTE = 60
INT_SECONDS_PER_HOUR = 3600
INT_SECONDS_PER_DAY = 86400
INT_SECONDS_PER_HALF_DAY = 43200

INT64_MAX: int = int(iinfo(int64).max)
"""``int``: largest whole-second count an epoch may hold, used as the +infinity sentinel."""

INT64_MIN: int = int(iinfo(int64).min)
"""``int``: smallest whole-second count an epoch may hold, used as the -infinity sentinel."""

# Julian date origins, expressed in days relative to J2000 (2000-01-01T12:00:00)
J2000_TO_JULIAN = 2.451545e6
J2000_TO_MJD = 51544.5
MJD_ZERO = 2400000.5

# Time scale constants
OFFSET_TT_TAI: float = 32.184
"""``float``: TT - TAI, seconds."""

OFFSET_TAI_GPS: float = 19.0
"""``float``: TAI - GPS time, seconds."""

L_G: float = 6.969290134e-10
"""``float``: rate of TT with respect to TCG, IAU 2000 Resolution B1.9."""

L_B: float = 1.550519768e-8
"""``float``: rate of TDB with respect to TCB, IAU 2006 Resolution B3."""

TDB0: float = -6.55e-5
"""``float``: TDB - TCB at the 1977 reference instant, seconds."""

MOD_JD_77: float = 43144.0
"""``float``: modified Julian date of 1977-01-01T00:00:00 TAI."""

T0_77_SECONDS: float = (MOD_JD_77 - J2000_TO_MJD) * SECONDS_PER_DAY + OFFSET_TT_TAI
"""``float``: 1977-01-01T00:00:32.184 TT in seconds since J2000, the TCG/TCB/TT/TDB synchronization instant."""
