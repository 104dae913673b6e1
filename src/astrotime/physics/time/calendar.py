"""Civil date and time values consumed by the epoch constructors.

Calendar arithmetic is delegated to :class:`datetime.date`, which covers the proleptic Gregorian
years 1 through 9999. This module only adds what ``datetime`` lacks for astronomical work: a time of
day whose seconds may reach 60 during a leap second, day-of-year helpers, and a day count relative
to the J2000 reference date.
"""

from __future__ import annotations

# Standard Library Imports
import datetime
from calendar import isleap
from dataclasses import dataclass

# Third Party Imports
from numpy import floor

# Local Imports
from ...common.exceptions import InvalidEpochArgument
from .. import constants as const

J2000_DATE: datetime.date = datetime.date(2000, 1, 1)
"""``datetime.date``: calendar date of the J2000 reference, which starts at 12:00 on this date."""

MAX_SECOND: float = 61.0
"""``float``: exclusive upper bound of the seconds of a minute, leaving room for a leap second."""


@dataclass(frozen=True)
class Time:
    """Time of day, with seconds allowed to reach 60 for leap seconds."""

    hour: int = 0
    """``int``: hour of the day, 0-23."""

    minute: int = 0
    """``int``: minute of the hour, 0-59."""

    second: float = 0.0
    """``float``: seconds of the minute, including the fractional part, [0, 61)."""

    def __post_init__(self):
        """Validate the time components."""
        if not 0 <= self.hour <= 23:
            raise InvalidEpochArgument(f"Time: hour must be an integer (0-23), got {self.hour!r}")
        if not 0 <= self.minute <= 59:
            raise InvalidEpochArgument(f"Time: minute must be an integer (0-59), got {self.minute!r}")
        if not 0.0 <= self.second < MAX_SECOND:
            raise InvalidEpochArgument(f"Time: second must be a float [0-61), got {self.second!r}")
        if self.second >= const.SECONDS_PER_MINUTE and (self.hour, self.minute) != (23, 59):
            raise InvalidEpochArgument(
                f"Time: second 60 or more is only valid at 23:59, got {self.hour!r}:{self.minute!r}:{self.second!r}",
            )

    @classmethod
    def fromSecondInDay(cls, second_in_day: float) -> Time:
        """Build a :class:`.Time` from the seconds elapsed since midnight.

        Values past the last minute of the day are folded into the 59th minute, so a leap second
        ``86400.5`` reads as ``23:59:60.5``.
        """
        if second_in_day >= const.SECONDS_PER_DAY - const.SECONDS_PER_MINUTE:
            return cls(23, 59, second_in_day - (const.SECONDS_PER_DAY - const.SECONDS_PER_MINUTE))

        hour, remainder = divmod(second_in_day, const.SECONDS_PER_HOUR)
        minute, second = divmod(remainder, const.SECONDS_PER_MINUTE)
        return cls(int(hour), int(minute), second)

    @property
    def second_in_day(self) -> float:
        """``float``: seconds elapsed since midnight."""
        return self.hour * const.SECONDS_PER_HOUR + self.minute * const.SECONDS_PER_MINUTE + self.second

    @property
    def fraction_of_day(self) -> float:
        """``float``: fraction of a nominal 86400 second day elapsed since midnight."""
        return self.second_in_day / const.SECONDS_PER_DAY

    @property
    def millisecond(self) -> int:
        """``int``: whole milliseconds of the current second."""
        return int(floor((self.second - floor(self.second)) * 1000.0))


MIDNIGHT = Time(0, 0, 0.0)
NOON = Time(12, 0, 0.0)


def dateFromDayOfYear(year: int, day_of_year: int) -> datetime.date:
    """Return the calendar date of the `day_of_year` (1-based) of `year`.

    Raises:
        InvalidEpochArgument: if `year` is outside 1-9999, or `day_of_year` doesn't exist in `year`
    """
    try:
        new_year = datetime.date(year, 1, 1)
    except (TypeError, ValueError) as error:
        raise InvalidEpochArgument(f"Day of year: invalid year {year!r}: {error}") from error

    days_in_year = 366 if isleap(new_year.year) else 365
    if not 1 <= day_of_year <= days_in_year:
        raise InvalidEpochArgument(f"Day of year must be within 1 and {days_in_year}, got {day_of_year!r}")

    return new_year + datetime.timedelta(days=day_of_year - 1)


def dayOfYear(date: datetime.date) -> int:
    """Return the 1-based day of the year of `date`."""
    return date.timetuple().tm_yday


def daysSinceJ2000(date: datetime.date) -> int:
    """Return the whole days from :data:`.J2000_DATE` to `date`, negative before 2000."""
    return date.toordinal() - J2000_DATE.toordinal()


def isCivilDayCount(days: int) -> bool:
    """Whether the date `days` whole days after :data:`.J2000_DATE` falls within the years 1-9999."""
    return datetime.date.min.toordinal() <= J2000_DATE.toordinal() + days <= datetime.date.max.toordinal()


def dateFromDaysSinceJ2000(days: int) -> datetime.date:
    """Return the calendar date `days` whole days after :data:`.J2000_DATE`.

    Raises:
        InvalidEpochArgument: if the date falls outside the years 1-9999
    """
    if not isCivilDayCount(days):
        raise InvalidEpochArgument(f"Day count {days} since J2000 is outside the civil calendar range")

    return datetime.date.fromordinal(J2000_DATE.toordinal() + days)


@dataclass(frozen=True)
class CivilDateTime:
    """Calendar date and time of day of an epoch in its own time scale."""

    date: datetime.date
    """``datetime.date``: calendar date."""

    time: Time
    """:class:`.Time`: time of day."""

    @property
    def year(self) -> int:
        """``int``: calendar year."""
        return self.date.year

    @property
    def month(self) -> int:
        """``int``: month of the year."""
        return self.date.month

    @property
    def day(self) -> int:
        """``int``: day of the month."""
        return self.date.day

    @property
    def day_of_year(self) -> int:
        """``int``: 1-based day of the year."""
        return dayOfYear(self.date)

    @property
    def hour(self) -> int:
        """``int``: hour of the day."""
        return self.time.hour

    @property
    def minute(self) -> int:
        """``int``: minute of the hour."""
        return self.time.minute

    @property
    def second(self) -> float:
        """``float``: seconds of the minute, 60 or more during a leap second."""
        return self.time.second

    @property
    def millisecond(self) -> int:
        """``int``: whole milliseconds of the current second."""
        return self.time.millisecond

    @property
    def fraction_of_day(self) -> float:
        """``float``: fraction of the day elapsed since midnight."""
        return self.time.fraction_of_day

    @property
    def second_in_day(self) -> float:
        """``float``: seconds elapsed since midnight."""
        return self.time.second_in_day

    def toDatetime(self) -> datetime.datetime:
        """Convert to a naive ``datetime``, truncated to microseconds.

        ``datetime`` has no notion of leap seconds, so a time inside one is clamped to the last
        representable microsecond of its minute.
        """
        second = min(self.second, const.SECONDS_PER_MINUTE - 1e-6)
        whole_second = int(floor(second))
        microsecond = min(int(round((second - whole_second) * 1e6)), 999999)
        return datetime.datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            whole_second,
            microsecond,
        )

    def isoformat(self) -> str:
        """Return ``YYYY-MM-DDTHH:MM:SS.sss``, keeping a leap second's ``60``."""
        second = floor(self.second * 1000.0) / 1000.0
        return f"{self.date.isoformat()}T{self.hour:02d}:{self.minute:02d}:{second:06.3f}"
