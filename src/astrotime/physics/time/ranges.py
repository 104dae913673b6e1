"""Evenly spaced sequences of epochs."""

from __future__ import annotations

# Standard Library Imports
from itertools import count
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import isfinite

# Local Imports
from ...common.exceptions import InvalidEpochArgument
from ...common.logger import astrotimeLogError

if TYPE_CHECKING:
    # Standard Library Imports
    import datetime
    from collections.abc import Iterator

    # Local Imports
    from .epoch import Epoch


def epochRange(start: Epoch, stop: Epoch, step: float | datetime.timedelta) -> Iterator[Epoch]:
    """Yield epochs from `start` up to and including `stop`, every `step`.

    Each epoch is computed as ``start + k * step`` rather than by accumulating steps, so rounding
    errors don't build up over long ranges. A negative `step` runs backwards.

    Args:
        start (:class:`.Epoch`): first epoch of the range
        stop (:class:`.Epoch`): inclusive bound of the range, converted to the scale of `start`
        step (``float`` | ``datetime.timedelta``): spacing between epochs, seconds

    Yields:
        :class:`.Epoch`: epochs in the scale of `start`

    Raises:
        InvalidEpochArgument: if `step` is zero or not finite
    """
    seconds = step.total_seconds() if hasattr(step, "total_seconds") else float(step)
    if seconds == 0.0 or not isfinite(seconds):
        err = f"Epoch range step must be finite and non-zero, got {step!r}"
        astrotimeLogError(err)
        raise InvalidEpochArgument(err)

    span = -start.difference(stop)
    for k in count():
        offset = k * seconds
        if (seconds > 0.0 and offset > span) or (seconds < 0.0 and offset < span):
            return
        yield start.withDelta(offset)
