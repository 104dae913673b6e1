"""Defines the :class:`.Epoch` class and its time scale specific subclasses.

An epoch is stored as two numbers: the integer count of seconds since 2000-01-01T12:00:00 read in
the epoch's own time scale, and the fractional residual of the current second. The integer part
spans the full calendar range exactly, while the residual keeps its full double precision no matter
how far the epoch is from the reference. Every operation combining two time values goes through
:func:`.compensatedAdd`, so precision isn't lost to rounding along the way.

Each epoch also caches its *scale offset*, the offset of its time scale from TAI at that instant,
which makes the atomic instant available without consulting any table again:

.. code-block:: python

    epoch = UTCEpoch.fromComponents(2017, 1, 1, 0, 0, 0.0)
    epoch.convertScale("TAI")  # 2017-01-01T00:00:37.000 TAI
    epoch + 60.0  # 2017-01-01T00:01:00.000 UTC

Epochs are immutable, hashable, and compare exactly.
"""

from __future__ import annotations

# Standard Library Imports
import datetime
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import isclose, isfinite

# Local Imports
from ...common.exceptions import InvalidEpochArgument, UnknownJulianOrigin
from ...common.logger import astrotimeLogError
from .. import constants as const
from .calendar import (
    MIDNIGHT,
    CivilDateTime,
    Time,
    dateFromDayOfYear,
    dateFromDaysSinceJ2000,
    daysSinceJ2000,
    isCivilDayCount,
)
from .compensated_sum import CompensatedSum, compensatedAdd, twoSum
from .context import resolveContext
from .discontinuity import leapWindowAdjustment, wallClockAdjustment
from .duration import Duration
from .scales import TimeScale, atomicOffset, offsetFromScaleSeconds

if TYPE_CHECKING:
    # Local Imports
    from .context import TimeContext
    from .relativistic import ObserverPosition


JULIAN_ORIGINS: dict[str, float] = {
    "j2000": 0.0,
    "julian": const.J2000_TO_JULIAN,
    "mjd": const.J2000_TO_MJD,
}
"""dict[str, float]: Julian date origins, as the Julian date (in days) of the J2000 reference in each."""


def _deltaSeconds(delta) -> float | None:
    """Return `delta` in seconds, ``None`` if it isn't a span of time."""
    if isinstance(delta, datetime.timedelta):
        return delta.total_seconds()
    if isinstance(delta, (int, float)) and not isinstance(delta, bool):
        return float(delta)
    return None


def _collapseOutOfRange(whole: int, fraction: float) -> tuple[int, float]:
    """Replace non-finite or out of 64 bit range fields by the matching sentinel fields."""
    if not isfinite(fraction):
        return (const.INT64_MIN if fraction < 0 else const.INT64_MAX), fraction
    if whole >= const.INT64_MAX:
        return const.INT64_MAX, float("inf")
    if whole <= const.INT64_MIN:
        return const.INT64_MIN, float("-inf")
    return whole, fraction


def _civilOffset(
    scale: TimeScale,
    date: datetime.date,
    time: Time,
    whole: int,
    fraction: float,
    leap: float,
    context: TimeContext | None,
    observer: ObserverPosition | None,
) -> float:
    """Return the scale offset of a civil reading.

    UTC and UT1 are pinned to the literal date, so a reading shifted by a leap second keeps the
    post-leap offset instead of the one found by searching around the counted seconds.
    """
    if scale is TimeScale.UTC:
        return -(resolveContext(context).leapSecondOffset(date) + leap)

    if scale is TimeScale.UT1:
        context = resolveContext(context)
        return context.ut1MinusUtc(date, time.fraction_of_day) - context.leapSecondOffset(date)

    return offsetFromScaleSeconds(scale, whole, fraction, context=context, observer=observer)


class Epoch:
    """Instant in time, read in a specific time scale.

    Concrete epochs are instances of one subclass per time scale (:class:`.TAIEpoch`,
    :class:`.UTCEpoch`, ...). The constructors may be called on :class:`.Epoch` itself as long as a
    `scale` is given, which selects the subclass.

    Epochs sitting before or after all representable time are *sentinels*: their
    :attr:`whole_seconds` is the smallest or largest 64 bit integer and their :attr:`fraction` the
    signed infinity. Sentinels propagate through arithmetic without raising.
    """

    scale: TimeScale | None = None
    """:class:`.TimeScale`: time scale the epoch is read in, set by each subclass."""

    __slots__ = ("_whole_seconds", "_fraction", "_scale_offset")

    def __init__(
        self,
        whole_seconds: int | float = 0,
        fraction: float = 0.0,
        scale_offset: float | None = None,
        context: TimeContext | None = None,
        observer: ObserverPosition | None = None,
    ):
        """Build an epoch from seconds since 2000-01-01T12:00:00 read in the epoch's time scale.

        Args:
            whole_seconds (``int`` | ``float``): seconds since the J2000 reference. A ``float`` is
                split into whole seconds and residual.
            fraction (``float``, optional): additional fractional seconds. Defaults to 0.
            scale_offset (``float``, optional): offset of the time scale from TAI at this instant.
                Defaults to ``None``, which computes it.
            context (:class:`.TimeContext`, optional): tables used to compute the offset. Defaults
                to the configured ones.
            observer (:class:`.ObserverPosition`, optional): observer for the topocentric TDB terms

        Raises:
            InvalidEpochArgument: if the class doesn't define a time scale
        """
        if self.scale is None:
            err = "Epoch: missing time scale, use a time scale specific class or pass a 'scale'"
            astrotimeLogError(err)
            raise InvalidEpochArgument(err)

        if isinstance(whole_seconds, int):
            shift, fraction = compensatedAdd(float(fraction), 0.0)
            whole = whole_seconds + shift
        else:
            whole, fraction = compensatedAdd(float(whole_seconds), float(fraction))

        if scale_offset is None:
            scale_offset = 0.0
            if isfinite(fraction):
                scale_offset = offsetFromScaleSeconds(self.scale, whole, fraction, context=context, observer=observer)
        self._setFields(*_collapseOutOfRange(whole, fraction), float(scale_offset))

    def _setFields(self, whole: int, fraction: float, scale_offset: float):
        self._whole_seconds = int(whole)
        self._fraction = float(fraction)
        self._scale_offset = scale_offset

    @classmethod
    def _fromFields(cls, whole: int, fraction: float, scale_offset: float) -> Epoch:
        """Build an epoch of this class from normalized fields, collapsing out of range values."""
        epoch = object.__new__(cls)
        epoch._setFields(*_collapseOutOfRange(whole, fraction), scale_offset)
        return epoch

    @classmethod
    def _targetClass(cls, scale: TimeScale | str | None) -> type[Epoch]:
        """Return the class building epochs in `scale`, or this class when `scale` is ``None``."""
        if scale is not None:
            return epochClass(scale)
        if cls.scale is None:
            err = "Epoch: missing time scale, use a time scale specific class or pass a 'scale'"
            astrotimeLogError(err)
            raise InvalidEpochArgument(err)
        return cls

    @classmethod
    def fromJulianDate(
        cls,
        jd1: float,
        jd2: float = 0.0,
        origin: str = "j2000",
        scale: TimeScale | str | None = None,
        context: TimeContext | None = None,
        observer: ObserverPosition | None = None,
    ) -> Epoch:
        """Build an epoch from a (possibly split) Julian date read in `scale`.

        The two parts are added with error compensation, so any split of the same date yields the
        same epoch, e.g. ``(2451545.0, 0.5)`` and ``(2451545.5, 0.0)``.

        Args:
            jd1 (``float``): first part of the Julian date, days
            jd2 (``float``, optional): second part of the Julian date, days. Defaults to 0.
            origin (``str``, optional): origin of the day count: ``"j2000"`` (2000-01-01T12:00),
                ``"julian"`` (4713 BC January 1 at noon) or ``"mjd"`` (1858-11-17T00:00). Defaults to
                ``"j2000"``.
            scale (:class:`.TimeScale` | ``str``, optional): time scale of the date. Defaults to the
                scale of the class.
            context (:class:`.TimeContext`, optional): tables to consult. Defaults to the configured ones.
            observer (:class:`.ObserverPosition`, optional): observer for the topocentric TDB terms

        Returns:
            :class:`.Epoch`: epoch of the subclass matching `scale`

        Raises:
            UnknownJulianOrigin: if `origin` isn't one of the supported origins
            InvalidEpochArgument: if no time scale is given
        """
        try:
            origin_days = JULIAN_ORIGINS[origin.lower()]
        except (AttributeError, KeyError):
            err = f"Unknown Julian date origin {origin!r}, expected one of {sorted(JULIAN_ORIGINS)}"
            astrotimeLogError(err)
            raise UnknownJulianOrigin(err) from None

        target = cls._targetClass(scale)
        jd1, jd2 = float(jd1), float(jd2)
        if abs(jd2) > abs(jd1):
            jd1, jd2 = jd2, jd1

        days, days_error = twoSum(jd1 - origin_days, jd2)
        whole, fraction = compensatedAdd(days * const.SECONDS_PER_DAY, days_error * const.SECONDS_PER_DAY)
        if not isfinite(fraction):
            return target._fromFields(whole, fraction, 0.0)

        offset = offsetFromScaleSeconds(target.scale, whole, fraction, context=context, observer=observer)
        return target._fromFields(whole, fraction, offset)

    @classmethod
    def fromCivil(
        cls,
        date: datetime.date,
        time: Time = MIDNIGHT,
        scale: TimeScale | str | None = None,
        context: TimeContext | None = None,
        observer: ObserverPosition | None = None,
    ) -> Epoch:
        """Build an epoch from a calendar date and time of day read in `scale`.

        A UTC reading within the last minute of a day ending with a leap second is shifted by that
        leap, so ``23:59:60.5`` lands half a second after ``23:59:59.5``.

        Args:
            date (``datetime.date``): calendar date
            time (:class:`.Time`, optional): time of day. Defaults to midnight.
            scale (:class:`.TimeScale` | ``str``, optional): time scale of the reading. Defaults to
                the scale of the class.
            context (:class:`.TimeContext`, optional): tables to consult. Defaults to the configured ones.
            observer (:class:`.ObserverPosition`, optional): observer for the topocentric TDB terms

        Returns:
            :class:`.Epoch`: epoch of the subclass matching `scale`

        Raises:
            InvalidEpochArgument: if `date` or `time` are of the wrong type, or no scale is given
            MissingLeapSecond: if UTC or UT1 is requested outside the leap second table
        """
        if not isinstance(date, datetime.date):
            raise InvalidEpochArgument(f"Epoch: expected a 'datetime.date', got {type(date)}")
        if not isinstance(time, Time):
            raise InvalidEpochArgument(f"Epoch: expected a 'Time', got {type(time)}")

        target = cls._targetClass(scale)
        leap = leapWindowAdjustment(target.scale, date, time, context=context)
        shift, fraction = compensatedAdd(time.second, -leap)
        whole = (
            daysSinceJ2000(date) * const.INT_SECONDS_PER_DAY
            - const.INT_SECONDS_PER_HALF_DAY
            + time.hour * const.INT_SECONDS_PER_HOUR
            + time.minute * const.INT_SECONDS_PER_MINUTE
            + shift
        )

        offset = _civilOffset(target.scale, date, time, whole, fraction, leap, context, observer)
        return target._fromFields(whole, fraction, offset)

    @classmethod
    def fromComponents(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.0,
        scale: TimeScale | str | None = None,
        context: TimeContext | None = None,
        observer: ObserverPosition | None = None,
    ) -> Epoch:
        """Build an epoch from calendar components, see :meth:`.fromCivil`.

        Raises:
            InvalidEpochArgument: if the components don't form a valid date and time
        """
        try:
            date = datetime.date(year, month, day)
        except (TypeError, ValueError) as error:
            raise InvalidEpochArgument(f"Epoch: invalid calendar date: {error}") from error

        return cls.fromCivil(date, Time(hour, minute, second), scale=scale, context=context, observer=observer)

    @classmethod
    def fromDayOfYear(
        cls,
        year: int,
        day_of_year: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.0,
        scale: TimeScale | str | None = None,
        context: TimeContext | None = None,
        observer: ObserverPosition | None = None,
    ) -> Epoch:
        """Build an epoch from a year and a 1-based day of the year, see :meth:`.fromCivil`."""
        date = dateFromDayOfYear(year, day_of_year)
        return cls.fromCivil(date, Time(hour, minute, second), scale=scale, context=context, observer=observer)

    @classmethod
    def fromDatetime(
        cls,
        date_time: datetime.datetime,
        scale: TimeScale | str | None = None,
        context: TimeContext | None = None,
        observer: ObserverPosition | None = None,
    ) -> Epoch:
        """Build an epoch from a ``datetime``, read in `scale`.

        Timezone aware values are first converted to UTC, then read in `scale` as is.
        """
        if date_time.tzinfo is not None:
            date_time = date_time.astimezone(datetime.timezone.utc).replace(tzinfo=None)

        time = Time(date_time.hour, date_time.minute, date_time.second + date_time.microsecond / 1e6)
        return cls.fromCivil(date_time.date(), time, scale=scale, context=context, observer=observer)

    @classmethod
    def now(cls, context: TimeContext | None = None) -> Epoch:
        """Return the current instant from the system clock, in UTC or in the scale of the class."""
        utc = UTCEpoch.fromDatetime(datetime.datetime.now(datetime.timezone.utc), context=context)
        if cls.scale is None or cls.scale is TimeScale.UTC:
            return utc
        return utc.convertScale(cls.scale, context=context)

    @property
    def whole_seconds(self) -> int:
        """``int``: whole seconds since 2000-01-01T12:00:00 in :attr:`scale`."""
        return self._whole_seconds

    @property
    def fraction(self) -> float:
        """``float``: fractional seconds on top of :attr:`whole_seconds`."""
        return self._fraction

    @property
    def scale_offset(self) -> float:
        """``float``: offset of :attr:`scale` from TAI (seconds) at this instant."""
        return self._scale_offset

    def isFinite(self) -> bool:
        """Whether this epoch is a regular instant rather than a sentinel."""
        return bool(isfinite(self._fraction))

    def atomicSplit(self) -> CompensatedSum:
        """Return the instant as whole and fractional seconds since J2000, read in TAI."""
        if not self.isFinite():
            return CompensatedSum(self._whole_seconds, self._fraction)

        shift, fraction = compensatedAdd(self._fraction, -self._scale_offset)
        return CompensatedSum(self._whole_seconds + shift, fraction)

    def withDelta(self, delta) -> Epoch:
        """Return this epoch shifted by `delta` (seconds, or a ``timedelta``).

        The scale offset is carried over as is, no table is consulted. A non-finite result, or one
        past the 64 bit range, collapses to the matching sentinel.
        """
        seconds = _deltaSeconds(delta)
        if seconds is None:
            raise TypeError(f"Epoch: cannot shift by {type(delta)}")

        shift, fraction = compensatedAdd(self._fraction, seconds)
        return self._fromFields(self._whole_seconds + shift, fraction, self._scale_offset)

    def convertScale(
        self,
        scale: TimeScale | str,
        context: TimeContext | None = None,
        observer: ObserverPosition | None = None,
    ) -> Epoch:
        """Return the same instant read in `scale`.

        Sentinels convert to the sentinels of `scale` without consulting any table.

        Args:
            scale (:class:`.TimeScale` | ``str``): target time scale
            context (:class:`.TimeContext`, optional): tables to consult. Defaults to the configured ones.
            observer (:class:`.ObserverPosition`, optional): observer for the topocentric TDB terms

        Returns:
            :class:`.Epoch`: epoch of the subclass matching `scale`

        Raises:
            MissingLeapSecond: if UTC or UT1 is involved outside the leap second table
            MissingEOP: if UT1 is involved outside the Earth orientation data
        """
        target = epochClass(scale)
        if target is type(self):
            return self
        if not self.isFinite():
            return target._fromFields(self._whole_seconds, self._fraction, 0.0)

        tai_whole, tai_fraction = self.atomicSplit()
        offset = atomicOffset(target.scale, tai_whole, tai_fraction, context=context, observer=observer)
        shift, fraction = compensatedAdd(tai_fraction, offset)
        return target._fromFields(tai_whole + shift, fraction, offset)

    def difference(self, other: Epoch, context: TimeContext | None = None) -> Duration:
        """Return the time elapsed from `other` to this epoch.

        `other` is first converted to the scale of this epoch, so the result is measured in the
        seconds of this epoch's scale.
        """
        if not isinstance(other, Epoch):
            raise TypeError(f"Epoch: cannot take the difference with {type(other)}")
        if other.scale is not self.scale:
            other = other.convertScale(self.scale, context=context)

        return Duration(
            (self._whole_seconds - other._whole_seconds) + (self._fraction - other._fraction),
        )

    def isApprox(self, other: Epoch, rtol: float = 1.49e-8, atol: float = 0.0) -> bool:
        """Whether `other` is the same instant up to floating point error on the fractional seconds.

        The whole seconds must match exactly. `other` is first converted to this epoch's scale.
        """
        if not isinstance(other, Epoch):
            return False
        if other.scale is not self.scale:
            other = other.convertScale(self.scale)

        if self._whole_seconds != other._whole_seconds:
            return False
        return bool(isclose(self._fraction, other._fraction, rtol=rtol, atol=atol))

    def j2000(self, scale: TimeScale | str | None = None) -> float:
        """Return the days since 2000-01-01T12:00:00, read in `scale` (defaults to :attr:`scale`)."""
        epoch = self if scale is None else self.convertScale(scale)
        return epoch._whole_seconds / const.SECONDS_PER_DAY + epoch._fraction / const.SECONDS_PER_DAY

    def julian(self, scale: TimeScale | str | None = None) -> float:
        """Return the Julian date, read in `scale` (defaults to :attr:`scale`)."""
        return const.J2000_TO_JULIAN + self.j2000(scale)

    def modifiedJulian(self, scale: TimeScale | str | None = None) -> float:
        """Return the modified Julian date, read in `scale` (defaults to :attr:`scale`)."""
        return const.J2000_TO_MJD + self.j2000(scale)

    def julianSplit(self, scale: TimeScale | str | None = None) -> tuple[float, float]:
        """Return the Julian date as whole days at noon plus the fraction of day since then.

        Splitting the date keeps the precision of the fraction of day, which a single ``float``
        Julian date loses to the large day count.
        """
        epoch = self if scale is None else self.convertScale(scale)
        days, seconds = divmod(epoch._whole_seconds, const.INT_SECONDS_PER_DAY)
        return const.J2000_TO_JULIAN + days, (seconds + epoch._fraction) / const.SECONDS_PER_DAY

    def _daySplit(self) -> tuple[int, float]:
        """Return the whole days since the J2000 date and the seconds since that day's midnight.

        A fraction rounding the seconds up to 86400 carries over to the next day.
        """
        days, seconds = divmod(self._whole_seconds + const.INT_SECONDS_PER_HALF_DAY, const.INT_SECONDS_PER_DAY)
        second_in_day = max(seconds + self._fraction, 0.0)
        if second_in_day >= const.SECONDS_PER_DAY:
            return days + 1, second_in_day - const.SECONDS_PER_DAY
        return days, second_in_day

    def toCivil(self, context: TimeContext | None = None) -> CivilDateTime:
        """Return the calendar date and time of day of this epoch, read in :attr:`scale`.

        Within a UTC leap second, the seconds of the minute read 60 or more.

        Raises:
            InvalidEpochArgument: if the epoch is a sentinel or outside the years 1-9999
        """
        if not self.isFinite():
            raise InvalidEpochArgument(f"Epoch: {self!r} has no calendar date")

        days, second_in_day = self._daySplit()
        date = dateFromDaysSinceJ2000(days)
        second_in_day += wallClockAdjustment(self.scale, date, second_in_day, self._scale_offset, context=context)
        return CivilDateTime(date, Time.fromSecondInDay(second_in_day))

    def toDatetime(self) -> datetime.datetime:
        """Convert to a naive ``datetime`` read in :attr:`scale`, see :meth:`.CivilDateTime.toDatetime`."""
        return self.toCivil().toDatetime()

    @property
    def year(self) -> int:
        """``int``: calendar year."""
        return self.toCivil().year

    @property
    def month(self) -> int:
        """``int``: month of the year."""
        return self.toCivil().month

    @property
    def day(self) -> int:
        """``int``: day of the month."""
        return self.toCivil().day

    @property
    def day_of_year(self) -> int:
        """``int``: 1-based day of the year."""
        return self.toCivil().day_of_year

    @property
    def hour(self) -> int:
        """``int``: hour of the day."""
        return self.toCivil().hour

    @property
    def minute(self) -> int:
        """``int``: minute of the hour."""
        return self.toCivil().minute

    @property
    def second(self) -> float:
        """``float``: seconds of the minute."""
        return self.toCivil().second

    @property
    def millisecond(self) -> int:
        """``int``: whole milliseconds of the current second."""
        return self.toCivil().millisecond

    @property
    def fraction_of_day(self) -> float:
        """``float``: fraction of the day elapsed since midnight."""
        return self.toCivil().fraction_of_day

    @property
    def second_in_day(self) -> float:
        """``float``: seconds elapsed since midnight."""
        return self.toCivil().second_in_day

    def __add__(self, delta):
        """Shift by a number of seconds, a :class:`.Duration` or a ``timedelta``."""
        if _deltaSeconds(delta) is None:
            return NotImplemented
        return self.withDelta(delta)

    __radd__ = __add__

    def __sub__(self, other):
        """Difference with another epoch, or shift back by a span of time."""
        if isinstance(other, Epoch):
            return self.difference(other)

        seconds = _deltaSeconds(other)
        if seconds is None:
            return NotImplemented
        return self.withDelta(-seconds)

    def __eq__(self, other):
        """Epochs are equal when read in the same scale with identical fields."""
        if not isinstance(other, Epoch):
            return NotImplemented
        return (
            self.scale is other.scale
            and self._whole_seconds == other._whole_seconds
            and self._fraction == other._fraction
        )

    def __hash__(self):
        """Hash the fields compared by equality."""
        return hash((self.scale, self._whole_seconds, self._fraction))

    def __lt__(self, other):
        """Order epochs by the time elapsed between them."""
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.difference(other) < 0.0

    def __le__(self, other):
        """Order epochs by the time elapsed between them."""
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.difference(other) <= 0.0

    def __gt__(self, other):
        """Order epochs by the time elapsed between them."""
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.difference(other) > 0.0

    def __ge__(self, other):
        """Order epochs by the time elapsed between them."""
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.difference(other) >= 0.0

    def __repr__(self):
        """Return the calendar reading and scale, without consulting any table."""
        days, second_in_day = self._daySplit()
        if not self.isFinite() or not isCivilDayCount(days):
            return f"{type(self).__name__}(whole_seconds={self._whole_seconds}, fraction={self._fraction})"

        civil = CivilDateTime(dateFromDaysSinceJ2000(days), Time.fromSecondInDay(second_in_day))
        return f"{civil.isoformat()} {self.scale}"

    def __str__(self):
        """Return a string representation of this :class:`.Epoch`."""
        return self.__repr__()


class TAIEpoch(Epoch):
    """Epoch read in International Atomic Time."""

    __slots__ = ()
    scale = TimeScale.TAI


class UTCEpoch(Epoch):
    """Epoch read in Coordinated Universal Time."""

    __slots__ = ()
    scale = TimeScale.UTC


class TTEpoch(Epoch):
    """Epoch read in Terrestrial Time."""

    __slots__ = ()
    scale = TimeScale.TT


class TDBEpoch(Epoch):
    """Epoch read in Barycentric Dynamical Time."""

    __slots__ = ()
    scale = TimeScale.TDB


class TCGEpoch(Epoch):
    """Epoch read in Geocentric Coordinate Time."""

    __slots__ = ()
    scale = TimeScale.TCG


class TCBEpoch(Epoch):
    """Epoch read in Barycentric Coordinate Time."""

    __slots__ = ()
    scale = TimeScale.TCB


class GPSEpoch(Epoch):
    """Epoch read in GPS Time."""

    __slots__ = ()
    scale = TimeScale.GPS


class UT1Epoch(Epoch):
    """Epoch read in Universal Time, following the rotation of the Earth."""

    __slots__ = ()
    scale = TimeScale.UT1


_EPOCH_CLASSES: dict[TimeScale, type[Epoch]] = {
    TimeScale.TAI: TAIEpoch,
    TimeScale.UTC: UTCEpoch,
    TimeScale.TT: TTEpoch,
    TimeScale.TDB: TDBEpoch,
    TimeScale.TCG: TCGEpoch,
    TimeScale.TCB: TCBEpoch,
    TimeScale.GPS: GPSEpoch,
    TimeScale.UT1: UT1Epoch,
}
"""dict[TimeScale, type[Epoch]]: Maps each time scale to the class of its epochs."""


def epochClass(scale: TimeScale | str) -> type[Epoch]:
    """Return the :class:`.Epoch` subclass of `scale`.

    Raises:
        InvalidEpochArgument: if `scale` doesn't name a supported time scale
    """
    return _EPOCH_CLASSES[TimeScale.fromAcronym(scale)]
