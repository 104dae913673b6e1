"""Defines :class:`.TimeScale` and the offsets of every scale from atomic time.

Every scale is related to International Atomic Time (TAI) by an *offset*, the scale's reading minus
TAI's at the same instant. Conversions between two arbitrary scales are always routed through TAI,
so adding a scale only requires one new offset function rather than one per pair of scales.

The offsets are evaluated at an instant given in the atomic frame as a ``(whole, fraction)`` pair of
seconds since J2000 (TAI). Only the UTC offset is discontinuous: it jumps by a whole second at each
leap second, and the day containing an instant has to be located exactly.
"""

from __future__ import annotations

# Standard Library Imports
import datetime
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

# Local Imports
from ...common.exceptions import DataRangeError, InvalidEpochArgument
from ...common.logger import astrotimeLogError
from .. import constants as const
from .calendar import dateFromDaysSinceJ2000
from .compensated_sum import compensatedAdd
from .context import resolveContext
from .relativistic import tcbMinusTDB, tcgMinusTT, tdbMinusTT

if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable

    # Local Imports
    from .context import TimeContext
    from .relativistic import ObserverPosition


class TimeScale(Enum):
    """Closed set of supported time scales, identified by their acronym."""

    TAI = "TAI"
    UTC = "UTC"
    TT = "TT"
    TDB = "TDB"
    TCG = "TCG"
    TCB = "TCB"
    GPS = "GPS"
    UT1 = "UT1"

    @property
    def full_name(self) -> str:
        """``str``: descriptive name of the time scale."""
        return _FULL_NAMES[self]

    @classmethod
    def fromAcronym(cls, name: str | TimeScale) -> TimeScale:
        """Return the :class:`.TimeScale` named by `name`.

        Args:
            name (``str`` | :class:`.TimeScale`): acronym (``"TT"``) or descriptive name
                (``"TerrestrialTime"``), case insensitive. Members are returned unchanged.

        Raises:
            InvalidEpochArgument: if `name` doesn't name a supported time scale
        """
        if isinstance(name, TimeScale):
            return name

        key = str(name).strip().replace(" ", "").upper()
        for scale in cls:
            if key in (scale.value, scale.full_name.replace(" ", "").upper()):
                return scale

        err = f"Unknown time scale: {name!r}"
        astrotimeLogError(err)
        raise InvalidEpochArgument(err)

    def __str__(self) -> str:
        """Return the acronym."""
        return self.value


_FULL_NAMES: dict[TimeScale, str] = {
    TimeScale.TAI: "International Atomic Time",
    TimeScale.UTC: "Coordinated Universal Time",
    TimeScale.TT: "Terrestrial Time",
    TimeScale.TDB: "Barycentric Dynamical Time",
    TimeScale.TCG: "Geocentric Coordinate Time",
    TimeScale.TCB: "Barycentric Coordinate Time",
    TimeScale.GPS: "GPS Time",
    TimeScale.UT1: "Universal Time",
}

LAST_MINUTE_START: int = const.INT_SECONDS_PER_DAY - const.INT_SECONDS_PER_MINUTE
"""``int``: seconds from midnight to 23:59:00, the start of the minute a leap second extends."""


def isWindowLeap(jump: int) -> bool:
    """Whether a change of TAI - UTC is a single leap second, the only kind applied to the last minute."""
    return abs(jump) == 1


class UTCDay(NamedTuple):
    """Result of :func:`.locateUTCDay`."""

    date: datetime.date
    """``datetime.date``: UTC date containing the instant."""

    elapsed: float
    """``float``: seconds since the UTC midnight, ``>= 86400`` during a positive leap second."""

    tai_minus_utc: int
    """``int``: TAI - UTC in effect on :attr:`date`."""

    window_leap: int
    """``int``: the +/-1 s leap ending :attr:`date` if the instant lies in its last minute, else 0."""


def locateUTCDay(tai_whole: int, tai_fraction: float, context: TimeContext) -> UTCDay:
    """Find the UTC day containing an atomic-frame instant.

    Args:
        tai_whole (``int``): whole seconds since J2000, TAI
        tai_fraction (``float``): fractional seconds
        context (:class:`.TimeContext`): source of the leap second table

    Returns:
        :class:`.UTCDay`: the UTC date, the wall clock seconds elapsed since its midnight, TAI - UTC
        during that day and the leap second the last minute of the day is subject to

    Raises:
        MissingLeapSecond: if the leap second table doesn't cover the instant
    """
    since_midnight = tai_whole + const.INT_SECONDS_PER_HALF_DAY
    day_index = since_midnight // const.INT_SECONDS_PER_DAY

    # TAI - UTC only ever amounts to a few seconds, so the UTC day is the TAI day or a neighbor
    for _ in range(3):
        utc_date = dateFromDaysSinceJ2000(day_index)
        count = context.leapSecondOffset(utc_date)
        elapsed = (since_midnight - day_index * const.INT_SECONDS_PER_DAY - count) + tai_fraction
        if elapsed < 0.0:
            day_index -= 1
            continue

        if elapsed < LAST_MINUTE_START:
            return UTCDay(utc_date, elapsed, count, 0)

        jump = context.leapAtMidnight(utc_date)
        if elapsed >= const.INT_SECONDS_PER_DAY + jump:
            day_index += 1
            continue

        return UTCDay(utc_date, elapsed, count, jump if isWindowLeap(jump) else 0)

    err = f"Leap second table is inconsistent around {dateFromDaysSinceJ2000(day_index)}"
    astrotimeLogError(err)
    raise DataRangeError(err)


def _taiOffset(tai_whole, tai_fraction, context, observer):
    """TAI is the reference frame."""
    return 0.0


def _ttOffset(tai_whole, tai_fraction, context, observer):
    """TT - TAI is a fixed constant."""
    return const.OFFSET_TT_TAI


def _gpsOffset(tai_whole, tai_fraction, context, observer):
    """GPS time was set to UTC in 1980 and never received a leap second since."""
    return -const.OFFSET_TAI_GPS


def _utcOffset(tai_whole, tai_fraction, context, observer):
    """Within the last minute before a leap second, the post-leap count keeps UTC readings continuous."""
    utc_day = locateUTCDay(tai_whole, tai_fraction, context)
    return -float(utc_day.tai_minus_utc + utc_day.window_leap)


def _ut1Offset(tai_whole, tai_fraction, context, observer):
    """UT1 follows the wall clock UTC reading, which is not subject to the last minute shift."""
    utc_day = locateUTCDay(tai_whole, tai_fraction, context)
    fraction_of_day = min(utc_day.elapsed / const.SECONDS_PER_DAY, 1.0)
    return context.ut1MinusUtc(utc_day.date, fraction_of_day) - utc_day.tai_minus_utc


def _ttSeconds(tai_whole, tai_fraction) -> float:
    return (tai_whole + const.OFFSET_TT_TAI) + tai_fraction


def _tdbOffset(tai_whole, tai_fraction, context, observer):
    return const.OFFSET_TT_TAI + tdbMinusTT(_ttSeconds(tai_whole, tai_fraction), observer)


def _tcgOffset(tai_whole, tai_fraction, context, observer):
    return const.OFFSET_TT_TAI + tcgMinusTT(_ttSeconds(tai_whole, tai_fraction))


def _tcbOffset(tai_whole, tai_fraction, context, observer):
    tt_seconds = _ttSeconds(tai_whole, tai_fraction)
    tdb_tt = tdbMinusTT(tt_seconds, observer)
    return const.OFFSET_TT_TAI + tdb_tt + tcbMinusTDB(tt_seconds + tdb_tt)


_OFFSET_MAP: dict[TimeScale, Callable[..., float]] = {
    TimeScale.TAI: _taiOffset,
    TimeScale.UTC: _utcOffset,
    TimeScale.TT: _ttOffset,
    TimeScale.TDB: _tdbOffset,
    TimeScale.TCG: _tcgOffset,
    TimeScale.TCB: _tcbOffset,
    TimeScale.GPS: _gpsOffset,
    TimeScale.UT1: _ut1Offset,
}
"""dict[TimeScale, Callable]: Maps each time scale to the function computing its offset from TAI."""

CONSTANT_OFFSET_SCALES: frozenset[TimeScale] = frozenset((TimeScale.TAI, TimeScale.TT, TimeScale.GPS))
"""frozenset[TimeScale]: scales whose offset from TAI never changes."""


def atomicOffset(
    scale: TimeScale,
    tai_whole: int,
    tai_fraction: float,
    context: TimeContext | None = None,
    observer: ObserverPosition | None = None,
) -> float:
    """Return the offset of `scale` from TAI (seconds) at an instant given in the atomic frame.

    Args:
        scale (:class:`.TimeScale`): time scale whose offset is requested
        tai_whole (``int``): whole seconds since J2000, TAI
        tai_fraction (``float``): fractional seconds
        context (:class:`.TimeContext`, optional): tables to consult. Defaults to the configured ones.
        observer (:class:`.ObserverPosition`, optional): observer for the topocentric TDB terms

    Returns:
        ``float``: reading of `scale` minus the reading of TAI, seconds

    Raises:
        MissingLeapSecond: if UTC or UT1 is requested outside the leap second table
        MissingEOP: if UT1 is requested outside the Earth orientation data
    """
    scale = TimeScale.fromAcronym(scale)
    if scale in CONSTANT_OFFSET_SCALES:
        return _OFFSET_MAP[scale](tai_whole, tai_fraction, None, observer)
    return _OFFSET_MAP[scale](tai_whole, tai_fraction, resolveContext(context), observer)


def offsetFromAtomic(
    scale: TimeScale,
    epoch,
    context: TimeContext | None = None,
    observer: ObserverPosition | None = None,
) -> float:
    """Return the offset of `scale` from TAI (seconds) at the instant of `epoch`.

    Args:
        scale (:class:`.TimeScale`): time scale whose offset is requested
        epoch (:class:`.Epoch`): instant, in any time scale
        context (:class:`.TimeContext`, optional): tables to consult. Defaults to the configured ones.
        observer (:class:`.ObserverPosition`, optional): observer for the topocentric TDB terms

    Returns:
        ``float``: reading of `scale` minus the reading of TAI, seconds
    """
    tai_whole, tai_fraction = epoch.atomicSplit()
    return atomicOffset(scale, tai_whole, tai_fraction, context=context, observer=observer)


def offsetBetween(
    scale_a: TimeScale,
    scale_b: TimeScale,
    epoch,
    context: TimeContext | None = None,
    observer: ObserverPosition | None = None,
) -> float:
    """Return the reading of `scale_b` minus the reading of `scale_a` at the instant of `epoch`."""
    tai_whole, tai_fraction = epoch.atomicSplit()
    offset_a = atomicOffset(scale_a, tai_whole, tai_fraction, context=context, observer=observer)
    offset_b = atomicOffset(scale_b, tai_whole, tai_fraction, context=context, observer=observer)
    return offset_b - offset_a


def offsetFromScaleSeconds(
    scale: TimeScale,
    whole: int,
    fraction: float,
    context: TimeContext | None = None,
    observer: ObserverPosition | None = None,
) -> float:
    """Return the offset of `scale` from TAI at an instant given as a reading of `scale` itself.

    The reading is first taken for the atomic instant to estimate the offset, then the offset is
    evaluated again at the corrected atomic instant. For UTC this lands on the post-leap side of
    an ambiguous reading.

    Args:
        scale (:class:`.TimeScale`): time scale of the reading
        whole (``int``): whole seconds since J2000 in `scale`
        fraction (``float``): fractional seconds
        context (:class:`.TimeContext`, optional): tables to consult. Defaults to the configured ones.
        observer (:class:`.ObserverPosition`, optional): observer for the topocentric TDB terms

    Returns:
        ``float``: reading of `scale` minus the reading of TAI, seconds
    """
    scale = TimeScale.fromAcronym(scale)
    estimate = atomicOffset(scale, whole, fraction, context=context, observer=observer)
    if scale in CONSTANT_OFFSET_SCALES:
        return estimate

    shift, tai_fraction = compensatedAdd(fraction, -estimate)
    return atomicOffset(scale, whole + shift, tai_fraction, context=context, observer=observer)
