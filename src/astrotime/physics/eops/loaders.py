"""EOP loaders: where daily Earth orientation records come from, and UT1 - UTC interpolation."""

from __future__ import annotations

# Standard Library Imports
import datetime
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import interp, rint

# Local Imports
from ...common.logger import astrotimeLogError, astrotimeLogInfo
from ...common.utilities import downloadDatFile, loadDatFile, remoteCachePath
from .. import constants as const
from . import EarthOrientationParameter, MissingEOP

if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable


class EOPLoader(ABC):
    """Daily table of :class:`.EarthOrientationParameter`, read on first use."""

    def __init__(self, location: str):
        """Prepare an empty table.

        Args:
            location (``str``): where the records are read from, meaning depends on the subclass
        """
        self._location: str = location
        self._eop_data: dict[datetime.date, EarthOrientationParameter] = {}
        self._is_loaded: bool = False

    @abstractmethod
    def load(self):
        """Fill the table and set :attr:`._is_loaded`."""
        raise NotImplementedError

    @property
    def records(self) -> dict[datetime.date, EarthOrientationParameter]:
        """``dict``: records by UTC date, loading them if needed."""
        if not self._is_loaded:
            self.load()
        return self._eop_data

    def getEarthOrientationParameters(self, eop_date: datetime.date) -> EarthOrientationParameter:
        """Return the record tabulated for `eop_date`.

        Raises:
            MissingEOP: `eop_date` isn't tabulated
        """
        try:
            return self.records[eop_date]
        except KeyError:
            msg = f"Could not retrieve EOP data for specified date: {eop_date}"
            astrotimeLogError(msg)
            raise MissingEOP(msg) from None

    def ut1MinusUtc(self, eop_date: datetime.date, fraction_of_day: float = 0.0) -> float:
        """Return UT1 - UTC (seconds) at `fraction_of_day` of the UTC day `eop_date`.

        Tabulated values are for 0h UTC and are interpolated linearly across the day. When a leap
        second ends the day, the next value is one second off, and that whole second is taken
        out before interpolating. The value of the last tabulated day holds for that whole day.

        Args:
            eop_date (``datetime.date``): UTC date
            fraction_of_day (``float``, optional): elapsed fraction of the UTC day

        Raises:
            MissingEOP: `eop_date` isn't tabulated
        """
        start = self.getEarthOrientationParameters(eop_date).delta_ut1
        next_day = self.records.get(eop_date + datetime.timedelta(days=1))
        if fraction_of_day == 0.0 or next_day is None:
            return start

        end = next_day.delta_ut1 - rint(next_day.delta_ut1 - start)
        return float(interp(fraction_of_day, (0.0, 1.0), (start, end)))

    def validEOP(self, eop_date: datetime.date) -> bool:
        """Return whether `eop_date` is tabulated."""
        return eop_date in self.records

    def earliestEOPDate(self) -> datetime.date:
        """Return the first tabulated date."""
        return min(self.records)

    def latestEOPDate(self) -> datetime.date:
        """Return the last tabulated date."""
        return max(self.records)

    def setEOPData(self, eop_date: datetime.date, eops: EarthOrientationParameter):
        """Add or replace the record of `eop_date`, a :class:`datetime.datetime` counts by its date.

        Raises:
            TypeError: `eop_date` isn't a date
        """
        if not isinstance(eop_date, datetime.date):
            raise TypeError(f"Unexpected 'eop_date' type: {type(eop_date)}")
        if isinstance(eop_date, datetime.datetime):
            eop_date = eop_date.date()
        self._eop_data[eop_date] = eops


class InMemoryEOPLoader(EOPLoader):
    """Table given directly as records, e.g. synthetic values in tests."""

    def __init__(self, eops: Iterable[EarthOrientationParameter]) -> None:
        """Store `eops`, each under its own :attr:`~.EarthOrientationParameter.date`."""
        super().__init__("memory")
        self._eop_data = {eop.date: eop for eop in eops}
        self._is_loaded = True

    def load(self) -> None:
        self._is_loaded = True


class DotDatEOPLoader(EOPLoader, ABC):
    """Table read from a celestrak style dat file.

    Rows hold ``year month day mjd x y ut1_utc lod dpsi deps dx dy dat``, angles in arcseconds.
    """

    def _readDatFile(self, path: Path):
        """Parse `path` with :func:`.loadDatFile` and store one record per row."""
        rows = loadDatFile(path)
        for year, month, day, _, x_p, y_p, ut1_utc, lod, d_psi, d_eps, *_, tai_utc in rows:
            eop_date = datetime.date(int(year), int(month), int(day))
            self._eop_data[eop_date] = EarthOrientationParameter(
                date=eop_date,
                x_p=x_p * const.ARCSEC2RAD,
                y_p=y_p * const.ARCSEC2RAD,
                d_delta_psi=d_psi * const.ARCSEC2RAD,
                d_delta_eps=d_eps * const.ARCSEC2RAD,
                delta_ut1=ut1_utc,
                length_of_day=lod,
                delta_atomic_time=int(tai_utc),
            )
        self._is_loaded = True
        astrotimeLogInfo(f"Loaded {len(rows)} EOP records from {self._location}")


class LocalDotDatEOPLoader(DotDatEOPLoader):
    """Dat file on the local file system, `location` is its path."""

    def load(self) -> None:
        self._readDatFile(Path(self._location))


class RemoteDotDatEOPLoader(DotDatEOPLoader):
    """Dat file downloaded from the URL `location`, and cached below :attr:`.CACHE_LOCATION`."""

    CACHE_LOCATION = Path("~/.astrotime/eop-cache/").expanduser()
    """:class:`pathlib.Path`: root directory of downloaded files."""

    def __init__(self, location: str, clear_cache: bool = False) -> None:
        """Locate the cached copy of `location`.

        Args:
            location (``str``): URL of the dat file
            clear_cache (``bool``, optional): delete the cached copy so the next load downloads it

        Raises:
            ValueError: `location` isn't a URL
        """
        super().__init__(location)
        self._cache_path = remoteCachePath(location, self.CACHE_LOCATION)
        if clear_cache:
            self._cache_path.unlink(missing_ok=True)

    def load(self) -> None:
        if not self._cache_path.exists():
            downloadDatFile(self._location, self._cache_path)
        self._readDatFile(self._cache_path)
