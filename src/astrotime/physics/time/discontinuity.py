"""Leap second handling for conversions between civil readings and epochs.

A day ending with a positive leap second holds 86401 seconds, one ending with a negative leap
second 86399. An epoch counts seconds as if every day held 86400, so the readings of the last minute
of such a day are shifted by the leap. The shift is decided per conversion from the literal
calendar date and time: it applies only at 23:59, and only for a single (+/-1 s) leap. Nothing
about it is stored on the resulting epoch.
"""

from __future__ import annotations

# Standard Library Imports
import datetime
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import rint

# Local Imports
from ..eops import MissingEOP
from .context import resolveContext
from .scales import LAST_MINUTE_START, TimeScale, isWindowLeap

if TYPE_CHECKING:
    # Local Imports
    from .calendar import Time
    from .context import TimeContext


def scaleDiscontinuity(
    scale: TimeScale,
    date: datetime.date,
    context: TimeContext | None = None,
) -> float:
    """Return the extra seconds that the day `date` holds in `scale`, compared to 86400.

    This is the jump of the scale's offset from TAI across the midnight ending `date`, with its sign
    reversed: ``1.0`` for a day ending with a positive leap second in UTC. For UT1 the leap is
    mostly compensated by the jump of UT1 - UTC, leaving a fraction of a second. Continuous scales
    have none, and neither does the last day covered by the tables.
 A table that stops at `date` gives no discontinuity for it either.

    Args:
        scale (:class:`.TimeScale`): time scale of the day
        date (``datetime.date``): calendar date in `scale`
        context (:class:`.TimeContext`, optional): tables to consult. Defaults to the configured ones.

    Returns:
        ``float``: extra seconds held by the day, negative for a shortened day

    Raises:
        MissingLeapSecond: if the leap second table doesn't cover `date`
        MissingEOP: if UT1 is requested and the EOP data doesn't cover `date`
    """
    scale = TimeScale.fromAcronym(scale)
    if scale not in (TimeScale.UTC, TimeScale.UT1):
        return 0.0

    context = resolveContext(context)
    leap = context.leapAtMidnight(date)
    if scale is TimeScale.UTC:
        return float(leap)

    today = context.ut1MinusUtc(date)
    try:
        following = context.ut1MinusUtc(date + datetime.timedelta(days=1))
    except MissingEOP:
        return 0.0
    return leap - (following - today)


def leapWindowAdjustment(
    scale: TimeScale,
    date: datetime.date,
    time: Time,
    context: TimeContext | None = None,
) -> float:
    """Return the seconds to remove from the reading `time` on `date` before counting it.

    The tables are only consulted for readings within the last minute of the day.

    Args:
        scale (:class:`.TimeScale`): time scale of the reading
        date (``datetime.date``): calendar date of the reading
        time (:class:`.Time`): time of day of the reading
        context (:class:`.TimeContext`, optional): tables to consult. Defaults to the configured ones.

    Returns:
        ``float``: the single leap ending `date` inside its last minute, ``0.0`` otherwise
    """
    if time.hour != 23 or time.minute != 59:
        return 0.0

    leap = scaleDiscontinuity(scale, date, context=context)
    if isWindowLeap(leap):
        return leap
    return 0.0


def wallClockAdjustment(
    scale: TimeScale,
    date: datetime.date,
    second_in_day: float,
    scale_offset: float,
    context: TimeContext | None = None,
) -> float:
    """Return the seconds to add to a counted second of the day to recover the wall clock reading.

    Inverse of :func:`.leapWindowAdjustment`. Within the last minute of a day, an epoch created from
    a shifted reading carries the post-leap offset, which tells it apart from the unshifted
    reading one second earlier.

    Args:
        scale (:class:`.TimeScale`): time scale of the epoch
        date (``datetime.date``): calendar date the counted seconds fall on
        second_in_day (``float``): counted seconds since midnight
        scale_offset (``float``): offset from TAI carried by the epoch
        context (:class:`.TimeContext`, optional): tables to consult. Defaults to the configured ones.

    Returns:
        ``float``: the leap to add back, ``0.0`` outside of a shifted last minute
    """
    if TimeScale.fromAcronym(scale) is not TimeScale.UTC or second_in_day < LAST_MINUTE_START - 1:
        return 0.0

    context = resolveContext(context)
    leap = scaleDiscontinuity(scale, date, context=context)
    if not isWindowLeap(leap):
        return 0.0

    if int(rint(-scale_offset)) == context.leapSecondOffset(date) + leap:
        return leap
    return 0.0
