"""Reference epochs of the major astronomical and engineering conventions.

All of them are read in TT or TAI, whose offsets are constant, so building them at import never
consults the leap second or Earth orientation tables.
"""

from __future__ import annotations

# Standard Library Imports
import datetime

# Local Imports
from .calendar import Time
from .epoch import TAIEpoch, TTEpoch

JULIAN_EPOCH = TTEpoch.fromJulianDate(0.0, origin="julian")
"""TTEpoch: origin of the Julian day count, 4713 BC January 1 at noon."""

J2000_EPOCH = TTEpoch(0, 0.0)
"""TTEpoch: J2000 reference, 2000-01-01T12:00:00 TT."""

MODIFIED_JULIAN_EPOCH = TTEpoch.fromCivil(datetime.date(1858, 11, 17))
"""TTEpoch: origin of the modified Julian day count, 1858-11-17T00:00:00 TT."""

FIFTIES_EPOCH = TTEpoch.fromCivil(datetime.date(1950, 1, 1))
"""TTEpoch: 1950-01-01T00:00:00 TT, the reference of the CNES Julian days."""

CCSDS_EPOCH = TTEpoch.fromCivil(datetime.date(1958, 1, 1))
"""TTEpoch: 1958-01-01T00:00:00 TT, the reference of the CCSDS time code formats."""

GALILEO_EPOCH = TTEpoch.fromCivil(datetime.date(1999, 8, 22))
"""TTEpoch: 1999-08-22T00:00:00 TT, the reference of the Galileo system time."""

GPS_EPOCH = TTEpoch.fromCivil(datetime.date(1980, 1, 6))
"""TTEpoch: 1980-01-06T00:00:00 TT, the reference of the GPS time."""

UNIX_EPOCH = TAIEpoch.fromCivil(datetime.date(1970, 1, 1), Time(0, 0, 10.0))
"""TAIEpoch: 1970-01-01T00:00:10 TAI, the reference of the Unix time."""

EPOCH_77 = TAIEpoch.fromCivil(datetime.date(1977, 1, 1))
"""TAIEpoch: 1977-01-01T00:00:00 TAI, when TT, TCG and TCB were synchronized."""

PAST_INFINITY = UNIX_EPOCH.withDelta(float("-inf"))
"""TAIEpoch: sentinel before all representable time."""

FUTURE_INFINITY = UNIX_EPOCH.withDelta(float("inf"))
"""TAIEpoch: sentinel after all representable time."""
