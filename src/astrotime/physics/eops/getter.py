"""Module level access to the configured EOP table."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.utilities import LoaderRegistry
from .loaders import EOPLoader, LocalDotDatEOPLoader, RemoteDotDatEOPLoader

if TYPE_CHECKING:
    # Standard Library Imports
    import datetime

    # Local Imports
    from . import EarthOrientationParameter


_EOP_LOADERS: LoaderRegistry[EOPLoader] = LoaderRegistry((LocalDotDatEOPLoader, RemoteDotDatEOPLoader))
"""LoaderRegistry: EOP loaders that may be named in the ``eop`` config section."""


def getEOPLoader(loader_name: str | None = None, loader_location: str | None = None) -> EOPLoader:
    """Return the shared :class:`.EOPLoader` of class `loader_name` reading `loader_location`.

    Either argument left out is taken from the ``eop`` section of :class:`.BehavioralConfig`.

    Raises:
        ValueError: `loader_name` isn't a known loader
    """
    config = BehavioralConfig.getConfig().eop
    return _EOP_LOADERS.get(loader_name or config.LoaderName, loader_location or config.LoaderLocation)


def getEarthOrientationParameters(
    eop_date: datetime.date,
    loader_name: str | None = None,
    loader_location: str | None = None,
) -> EarthOrientationParameter:
    """Return the EOP record of `eop_date`, see :meth:`.EOPLoader.getEarthOrientationParameters`.

    Raises:
        MissingEOP: `eop_date` isn't tabulated
    """
    return getEOPLoader(loader_name, loader_location).getEarthOrientationParameters(eop_date)


def setEarthOrientationParameters(
    eop_date: datetime.date,
    eop_data: EarthOrientationParameter,
    loader_name: str | None = None,
    loader_location: str | None = None,
):
    """Add or replace the EOP record of `eop_date` in the shared table."""
    getEOPLoader(loader_name, loader_location).setEOPData(eop_date, eop_data)


def ut1MinusUtc(
    eop_date: datetime.date,
    fraction_of_day: float = 0.0,
    loader_name: str | None = None,
    loader_location: str | None = None,
) -> float:
    """Return UT1 - UTC (seconds) within the UTC day `eop_date`, see :meth:`.EOPLoader.ut1MinusUtc`.

    Raises:
        MissingEOP: `eop_date` isn't tabulated
    """
    return getEOPLoader(loader_name, loader_location).ut1MinusUtc(eop_date, fraction_of_day)
