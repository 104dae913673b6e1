from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# astrotime Imports
from astrotime.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from astrotime.physics.eops.loaders import InMemoryEOPLoader
from astrotime.physics.time.context import TimeContext
from astrotime.physics.time.leap_seconds.loaders import InMemoryLeapSecondLoader

# Local Imports
from . import SYNTHETIC_EOPS, SYNTHETIC_LEAP_ENTRIES, SYNTHETIC_VALID_UNTIL


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete each environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        yield
        # Make sure we reset the config after each test function
        BehavioralConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="leap_loader")
def getSyntheticLeapLoader() -> InMemoryLeapSecondLoader:
    """Create a leap second table with a fictitious negative leap second and an expiry date."""
    return InMemoryLeapSecondLoader(SYNTHETIC_LEAP_ENTRIES, valid_until=SYNTHETIC_VALID_UNTIL)


@pytest.fixture(name="eop_loader")
def getSyntheticEOPLoader() -> InMemoryEOPLoader:
    """Create EOP data around the 2016 leap second."""
    return InMemoryEOPLoader(SYNTHETIC_EOPS)


@pytest.fixture(name="context")
def getSyntheticContext(leap_loader: InMemoryLeapSecondLoader, eop_loader: InMemoryEOPLoader) -> TimeContext:
    """Bundle the synthetic tables into a :class:`.TimeContext`."""
    return TimeContext(leap_seconds=leap_loader, eops=eop_loader)
