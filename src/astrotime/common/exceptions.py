"""Contains all the custom-defined exceptions used in astrotime."""

from __future__ import annotations


class InvalidEpochArgument(ValueError):
    """Exception indicating an epoch was requested from invalid or incomplete arguments."""


class UnknownJulianOrigin(InvalidEpochArgument):
    """Exception indicating a Julian date was given relative to an unsupported origin."""


class DataRangeError(Exception):
    """Exception indicating a tabulated quantity was requested outside of its coverage."""


class MissingLeapSecond(DataRangeError):  # noqa: N818
    """Error thrown when the leap second table has no entry valid for a specified date."""
