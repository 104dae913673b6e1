"""Leap second loaders: where the TAI - UTC table comes from, and lookups by UTC date."""

from __future__ import annotations

# Standard Library Imports
import datetime
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import array, int64, searchsorted

# Local Imports
from ....common.exceptions import MissingLeapSecond
from ....common.logger import astrotimeLogError, astrotimeLogInfo
from ....common.utilities import downloadDatFile, loadDatFile, remoteCachePath
from . import LeapSecondEntry

if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable


class LeapSecondLoader(ABC):
    """Table of accumulated leap seconds, read on first use.

    Each :class:`.LeapSecondEntry` holds from its date until the next entry. The last entry holds
    until :attr:`.valid_until`, or indefinitely when no expiry is set.
    """

    def __init__(self, location: str, valid_until: datetime.date | None = None):
        """Prepare an empty table.

        Args:
            location (``str``): where the table is read from, meaning depends on the subclass
            valid_until (``datetime.date``, optional): last UTC date the table is known to cover
        """
        self._location: str = location
        self._valid_until: datetime.date | None = valid_until
        self._entries: dict[datetime.date, LeapSecondEntry] = {}
        self._ordinals = array([], dtype=int64)
        self._offsets: list[int] = []
        self._is_loaded: bool = False

    @abstractmethod
    def load(self):
        """Fill the table through :meth:`._setEntries`."""
        raise NotImplementedError

    @property
    def valid_until(self) -> datetime.date | None:
        """``datetime.date | None``: last UTC date the table is known to cover."""
        return self._valid_until

    @property
    def entries(self) -> dict[datetime.date, LeapSecondEntry]:
        """``dict``: table entries by effective date, in date order, loading them if needed."""
        if not self._is_loaded:
            self.load()
        return self._entries

    def leapSecondOffset(self, leap_date: datetime.date) -> int:
        """Return TAI - UTC (seconds) for the whole UTC day `leap_date`.

        Raises:
            MissingLeapSecond: `leap_date` precedes the first entry, or follows :attr:`.valid_until`
        """
        if not self._is_loaded:
            self.load()

        if self._valid_until is not None and leap_date > self._valid_until:
            msg = f"Leap second table expired on {self._valid_until}, no entry valid for: {leap_date}"
            astrotimeLogError(msg)
            raise MissingLeapSecond(msg)

        position = int(searchsorted(self._ordinals, leap_date.toordinal(), side="right"))
        if position == 0:
            msg = f"Leap second table has no entry valid for: {leap_date}"
            astrotimeLogError(msg)
            raise MissingLeapSecond(msg)

        return self._offsets[position - 1]

    def earliestDate(self) -> datetime.date:
        """Return the date of the first entry."""
        return next(iter(self.entries))

    def latestDate(self) -> datetime.date:
        """Return the date of the last entry."""
        return next(reversed(self.entries))

    def setLeapSecond(self, leap_date: datetime.date, tai_minus_utc: int):
        """Add or replace the entry effective from `leap_date`, a :class:`datetime.datetime` counts by its date.

        Raises:
            TypeError: `leap_date` isn't a date
        """
        if not isinstance(leap_date, datetime.date):
            raise TypeError(f"Unexpected 'leap_date' type: {type(leap_date)}")
        if isinstance(leap_date, datetime.datetime):
            leap_date = leap_date.date()

        updated = dict(self.entries)
        updated[leap_date] = LeapSecondEntry(leap_date, int(tai_minus_utc))
        self._setEntries(updated.values())

    def _setEntries(self, entries: Iterable[LeapSecondEntry]):
        """Replace the table with `entries`, given in any order."""
        ordered = sorted(entries, key=lambda entry: entry.date)
        self._entries = {entry.date: entry for entry in ordered}
        self._ordinals = array([entry.date.toordinal() for entry in ordered], dtype=int64)
        self._offsets = [entry.tai_minus_utc for entry in ordered]
        self._is_loaded = True


class InMemoryLeapSecondLoader(LeapSecondLoader):
    """Table given directly as entries, e.g. synthetic leap seconds in tests."""

    def __init__(
        self,
        entries: Iterable[LeapSecondEntry],
        valid_until: datetime.date | None = None,
    ) -> None:
        """Store `entries`, in any order, expiring after `valid_until` if given."""
        super().__init__("memory", valid_until=valid_until)
        self._setEntries(entries)

    def load(self) -> None:
        self._is_loaded = True


class DotDatLeapSecondLoader(LeapSecondLoader, ABC):
    """Table read from a dat file with one ``year month day tai_minus_utc`` row per leap second."""

    def _readDatFile(self, path):
        """Parse `path` with :func:`.loadDatFile` and replace the table with its rows."""
        entries = [
            LeapSecondEntry(datetime.date(int(year), int(month), int(day)), int(tai_minus_utc))
            for year, month, day, tai_minus_utc in loadDatFile(path)
        ]
        self._setEntries(entries)
        astrotimeLogInfo(f"Loaded {len(entries)} leap second entries from {self._location}")


class ModuleDotDatLeapSecondLoader(DotDatLeapSecondLoader):
    """Table shipped with the package, `location` is a file name in :attr:`.LEAP_SECOND_MODULE`."""

    LEAP_SECOND_MODULE: str = "astrotime.physics.data.leap_seconds"
    """``str``: package holding the bundled tables."""

    def load(self) -> None:
        table = resources.files(self.LEAP_SECOND_MODULE).joinpath(self._location)
        with resources.as_file(table) as table_path:
            self._readDatFile(table_path)


class LocalDotDatLeapSecondLoader(DotDatLeapSecondLoader):
    """Dat file on the local file system, `location` is its path."""

    def load(self) -> None:
        self._readDatFile(Path(self._location))


class RemoteDotDatLeapSecondLoader(DotDatLeapSecondLoader):
    """Dat file downloaded from the URL `location`, and cached below :attr:`.CACHE_LOCATION`."""

    CACHE_LOCATION = Path("~/.astrotime/leap-second-cache/").expanduser()
    """:class:`pathlib.Path`: root directory of downloaded files."""

    def __init__(
        self,
        location: str,
        valid_until: datetime.date | None = None,
        clear_cache: bool = False,
    ) -> None:
        """Locate the cached copy of `location`.

        Args:
            location (``str``): URL of the dat file
            valid_until (``datetime.date``, optional): last UTC date the table is known to cover
            clear_cache (``bool``, optional): delete the cached copy so the next load downloads it

        Raises:
            ValueError: `location` isn't a URL
        """
        super().__init__(location, valid_until=valid_until)
        self._cache_path = remoteCachePath(location, self.CACHE_LOCATION)
        if clear_cache:
            self._cache_path.unlink(missing_ok=True)

    def load(self) -> None:
        if not self._cache_path.exists():
            downloadDatFile(self._location, self._cache_path, columns=4)
        self._readDatFile(self._cache_path)
