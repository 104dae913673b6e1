"""Defines the :class:`.Duration` class, the span of time between two epochs.

Subclassing ``float`` keeps durations usable anywhere a number of seconds is expected, while
letting epoch arithmetic tell a span of time apart from a plain scalar:

.. code-block:: python

    elapsed = later - earlier  # Duration
    assert isinstance(elapsed, Duration)

    later == earlier + elapsed  # True

"""

from __future__ import annotations

# Standard Library Imports
from datetime import timedelta

# Local Imports
from .. import constants as const


class Duration(float):
    """Signed span of time, in seconds.

    Sums, differences, scaling and remainders of durations stay durations. Dividing two durations
    yields a plain ``float`` ratio.
    """

    @classmethod
    def fromDays(cls, days: float) -> Duration:
        """Build a :class:`.Duration` of `days` nominal 86400 second days."""
        return cls(float(days) * const.SECONDS_PER_DAY)

    @classmethod
    def fromTimedelta(cls, delta: timedelta) -> Duration:
        """Build a :class:`.Duration` from a ``datetime.timedelta``."""
        return cls(delta.total_seconds())

    @property
    def days(self) -> float:
        """``float``: duration in nominal 86400 second days."""
        return float(self) / const.SECONDS_PER_DAY

    def toTimedelta(self) -> timedelta:
        """Convert to ``datetime.timedelta``, which truncates to microseconds."""
        return timedelta(seconds=float(self))

    def __add__(self, other):
        """Durations add to durations."""
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Duration(float(self) + float(other))

    __radd__ = __add__

    def __sub__(self, other):
        """Durations subtract to durations."""
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Duration(float(self) - float(other))

    def __rsub__(self, other):
        """Support ``float - Duration``."""
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Duration(float(other) - float(self))

    def __mul__(self, other):
        """Scale a duration."""
        if isinstance(other, Duration) or not isinstance(other, (int, float)):
            return NotImplemented
        return Duration(float(self) * float(other))

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Ratio of two durations, or a duration scaled by ``1 / other``."""
        if isinstance(other, Duration):
            return float(self) / float(other)
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Duration(float(self) / float(other))

    def __mod__(self, other):
        """Remainder of a duration."""
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Duration(float(self) % float(other))

    def __neg__(self):
        """Reverse the sign of a duration."""
        return Duration(-float(self))

    def __abs__(self):
        """Magnitude of a duration."""
        return Duration(abs(float(self)))

    def __hash__(self):
        """Override hash to return just the float representation of the class."""
        return hash(float(self))

    def __repr__(self):
        """Return a string representation of this :class:`.Duration`."""
        return f"Duration({float(self)!r} s)"

    def __str__(self):
        """Return a string representation of this :class:`.Duration`."""
        return self.__repr__()
