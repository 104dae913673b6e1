"""Module level access to the configured leap second table."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ....common.behavioral_config import BehavioralConfig
from ....common.utilities import LoaderRegistry
from .loaders import (
    LeapSecondLoader,
    LocalDotDatLeapSecondLoader,
    ModuleDotDatLeapSecondLoader,
    RemoteDotDatLeapSecondLoader,
)

if TYPE_CHECKING:
    # Standard Library Imports
    import datetime


_LEAP_SECOND_LOADERS: LoaderRegistry[LeapSecondLoader] = LoaderRegistry(
    (ModuleDotDatLeapSecondLoader, LocalDotDatLeapSecondLoader, RemoteDotDatLeapSecondLoader),
)
"""LoaderRegistry: leap second loaders that may be named in the ``leap_seconds`` config section."""


def getLeapSecondLoader(
    loader_name: str | None = None,
    loader_location: str | None = None,
) -> LeapSecondLoader:
    """Return the shared :class:`.LeapSecondLoader` of class `loader_name` reading `loader_location`.

    Arguments left out, and the table expiry, come from the ``leap_seconds`` section of
    :class:`.BehavioralConfig`. A given table is read at most once per process.

    Raises:
        ValueError: `loader_name` isn't a known loader
    """
    config = BehavioralConfig.getConfig().leap_seconds
    return _LEAP_SECOND_LOADERS.get(
        loader_name or config.LoaderName,
        loader_location or config.LoaderLocation,
        valid_until=config.ValidUntil,
    )


def leapSecondOffset(
    leap_date: datetime.date,
    loader_name: str | None = None,
    loader_location: str | None = None,
) -> int:
    """Return TAI - UTC (seconds) for the UTC day `leap_date`, see :meth:`.LeapSecondLoader.leapSecondOffset`.

    Raises:
        MissingLeapSecond: the table has no entry valid for `leap_date`
    """
    return getLeapSecondLoader(loader_name, loader_location).leapSecondOffset(leap_date)
