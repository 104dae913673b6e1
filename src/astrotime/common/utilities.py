"""Helpers shared by the table loaders: dat file parsing, remote file caching & loader memoization."""

from __future__ import annotations

# Standard Library Imports
from collections import namedtuple
from pathlib import Path
from typing import TYPE_CHECKING, Generic, TypeVar
from urllib.parse import urlparse
from urllib.request import urlopen

# Local Imports
from .logger import astrotimeLogError, astrotimeLogInfo

if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable
    from typing import Any


COMMENT_CHARACTER: str = "#"
"""``str``: lines of a dat file starting with this character are ignored."""


def _isDataLine(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith(COMMENT_CHARACTER)


def loadDatFile(file_name, delim=None):
    """Read a table of numbers, one row per line.

    Args:
        file_name (``str`` | :class:`pathlib.Path`): dat file to read
        delim (``str``, optional): separator between values of a row. By default, any run of
            whitespace separates values.

    Raises:
        ``FileNotFoundError``: `file_name` doesn't exist
        ``ValueError``: a value isn't convertible to ``float``
        ``OSError``: the file has no data rows

    Returns:
        ``list``: rows of ``float`` values, comments & blank lines removed
    """
    rows = []
    try:
        with open(file_name, encoding="utf-8") as data_file:
            for line in filter(_isDataLine, data_file):
                rows.append([float(value) for value in line.split(sep=delim)])
    except FileNotFoundError:
        astrotimeLogError(f"Could not find DAT file: {file_name}")
        raise
    except ValueError as err:
        msg = f"Parsing error reading DAT file: {file_name}"
        astrotimeLogError(msg)
        raise ValueError(msg) from err

    if not rows:
        msg = f"Empty DAT file: {file_name}"
        astrotimeLogError(msg)
        raise OSError(msg)

    return rows


def remoteCachePath(url: str, cache_root: Path) -> Path:
    """Return where the download of `url` is kept, below `cache_root`.

    The host name becomes a directory, with dots replaced, followed by the URL path.

    Raises:
        ``ValueError``: `url` has no host
    """
    parsed = urlparse(url)
    if not parsed.netloc:
        msg = f"Unable to parse URL: {url}"
        astrotimeLogError(msg)
        raise ValueError(msg)
    return cache_root.joinpath(parsed.netloc.replace(".", "_"), *parsed.path.strip("/").split("/"))


def downloadDatFile(url: str, destination: Path, columns: int | None = None):
    """Save the numeric rows of the remote text file `url` to `destination`.

    Header and free text lines are dropped, so the saved copy can be read by :func:`.loadDatFile`.

    Args:
        url (``str``): remote text file
        destination (:class:`pathlib.Path`): local copy, parent directories are created
        columns (``int``, optional): only keep rows with this many values
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    kept = 0
    with urlopen(url) as response, open(destination, "wb") as local_copy:  # noqa: S310
        for line in response:
            try:
                values = [float(value) for value in line.split()]
            except ValueError:
                continue
            if values and (columns is None or len(values) == columns):
                local_copy.write(line)
                kept += 1
    astrotimeLogInfo(f"Cached {kept} rows of {url} in {destination}")


LoaderTag = namedtuple("LoaderTag", ("loader_name", "loader_location"))
"""NamedTuple: identifies a configured loader by class name & data location."""

LoaderT = TypeVar("LoaderT")


class LoaderRegistry(Generic[LoaderT]):
    """Creates table loaders by class name, and keeps one instance per :data:`.LoaderTag`.

    A table is therefore read at most once per process, whichever module asks for it.
    """

    def __init__(self, loader_classes: Iterable[type[LoaderT]]):
        """Register the loader classes that may be named in the configuration."""
        self._classes: dict[str, type[LoaderT]] = {cls.__name__: cls for cls in loader_classes}
        self._loaders: dict[LoaderTag, LoaderT] = {}

    def get(self, loader_name: str, loader_location: str, **kwargs: Any) -> LoaderT:
        """Return the loader of class `loader_name` reading `loader_location`.

        Args:
            loader_name (``str``): registered loader class name
            loader_location (``str``): where the loader reads its table from
            kwargs: extra arguments given to the loader when it is first created

        Raises:
            ``ValueError``: `loader_name` isn't registered
        """
        tag = LoaderTag(loader_name, loader_location)
        if tag not in self._loaders:
            if loader_name not in self._classes:
                msg = f"Specified loader '{loader_name}' is undefined"
                astrotimeLogError(msg)
                raise ValueError(msg)
            self._loaders[tag] = self._classes[loader_name](loader_location, **kwargs)
        return self._loaders[tag]
