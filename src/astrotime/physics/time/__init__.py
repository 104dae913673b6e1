"""Contains the epoch representation and the conversions between time scales.

An :class:`.Epoch` is read in one of the :class:`.TimeScale` members, and converts to any other by
going through International Atomic Time. Tables consulted along the way (leap seconds, UT1 - UTC)
are bundled in a :class:`.TimeContext`, defaulting to the configured loaders.
"""

# Local Imports
# forward-facing API import
from .calendar import CivilDateTime, Time  # noqa: F401
from .compensated_sum import CompensatedSum, compensatedAdd, twoSum  # noqa: F401
from .context import TimeContext, getDefaultContext  # noqa: F401
from .discontinuity import scaleDiscontinuity  # noqa: F401
from .duration import Duration  # noqa: F401
from .epoch import (  # noqa: F401
    Epoch,
    GPSEpoch,
    TAIEpoch,
    TCBEpoch,
    TCGEpoch,
    TDBEpoch,
    TTEpoch,
    UT1Epoch,
    UTCEpoch,
    epochClass,
)
from .ranges import epochRange  # noqa: F401
from .reference_epochs import (  # noqa: F401
    CCSDS_EPOCH,
    EPOCH_77,
    FIFTIES_EPOCH,
    FUTURE_INFINITY,
    GALILEO_EPOCH,
    GPS_EPOCH,
    J2000_EPOCH,
    JULIAN_EPOCH,
    MODIFIED_JULIAN_EPOCH,
    PAST_INFINITY,
    UNIX_EPOCH,
)
from .relativistic import ObserverPosition  # noqa: F401
from .scales import TimeScale, offsetBetween, offsetFromAtomic  # noqa: F401
