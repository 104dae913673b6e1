"""Error-compensated addition of time values.

Adding a small sub-second residual to an offset of billions of seconds in plain double precision
throws away roughly ten significant digits. The functions here use the classic two-sum
transformation to recover the rounding error of every addition exactly, then split the result into
an integer number of seconds and a residual carrying everything the integer can't.

References:
    #. Knuth, *The Art of Computer Programming*, Vol. 2, Section 4.2.2
"""

from __future__ import annotations

# Standard Library Imports
from typing import NamedTuple

# Third Party Imports
from numpy import floor, isfinite

# Local Imports
from ..constants import INT64_MAX, INT64_MIN


class CompensatedSum(NamedTuple):
    """Result of :func:`.compensatedAdd`."""

    whole: int
    """``int``: integer floor of the sum, or an int64 bound when the sum isn't finite."""

    residual: float
    """``float``: remainder of the sum above :attr:`whole`, including the recovered rounding error."""


def twoSum(a: float, b: float) -> tuple[float, float]:
    """Add `a` and `b`, returning the rounded sum and its exact rounding error.

    The returned pair satisfies ``a + b == total + error`` exactly in real arithmetic.

    Args:
        a (``float``): first addend
        b (``float``): second addend

    Returns:
        ``tuple``: the floating point sum and the error lost when rounding it
    """
    total = a + b
    a_prime = total - b
    b_prime = total - a_prime
    return total, (a - a_prime) + (b - b_prime)


def compensatedAdd(a: float, b: float) -> CompensatedSum:
    """Add two values of seconds, splitting the result into whole seconds and a residual.

    Non-finite sums collapse onto the sentinel representation: ``(INT64_MAX, inf)`` or
    ``(INT64_MIN, -inf)``. A NaN sum takes the upper bound and carries the NaN along.

    Args:
        a (``float``): first addend, seconds
        b (``float``): second addend, seconds

    Returns:
        :class:`.CompensatedSum`: integer floor of the sum and the fractional residual
    """
    total, error = twoSum(a, b)
    if not isfinite(total):
        return CompensatedSum(INT64_MIN if total < 0 else INT64_MAX, total)

    whole = int(floor(total))
    return CompensatedSum(whole, (total - whole) + error)
