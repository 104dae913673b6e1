"""Process-wide settings read from an INI style file.

The packaged ``default_behavior.config`` is read unless a custom file is given, either directly to
:meth:`.BehavioralConfig.getConfig` or through the ``ASTROTIME_BEHAVIOR_CONFIG`` environment
variable. Options missing from a custom file keep their defaults. Settings are accessed as
attributes, per section:

.. code-block:: python

    level = BehavioralConfig.getConfig().logging.Level
"""

from __future__ import annotations

# Standard Library Imports
import logging
import os
from configparser import ConfigParser
from configparser import Error as ConfigError
from datetime import date
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any, Final


CONFIG_ENV_VARIABLE: str = "ASTROTIME_BEHAVIOR_CONFIG"
"""``str``: environment variable that may point at a custom config file."""


class ConfigOption(NamedTuple):
    """Default value of a config option, and the :class:`.AstrotimeConfigParser` method reading it."""

    default: Any
    reader: str


class SubConfig:
    """Attribute access to the options of one config section."""

    def __init__(self, section: str):
        """Create an empty section.

        Args:
            section (``str``): name of the section in the config file
        """
        if not isinstance(section, str):
            raise TypeError(f"Config section name must be a string, not {type(section)}")
        self.section = section

    def setonce(self, name: str, value: Any):
        """Set option `name`, refusing to overwrite a value that is already present.

        Args:
            name (``str``): option name
            value (``any``): parsed option value

        Raises:
            ``AttributeError``: the option was already set
        """
        if name in vars(self):
            raise AttributeError(
                f"SubConfig {self.section!r} already has a value set for {name!r}: {getattr(self, name)!r}",
            )
        setattr(self, name, value)


class AstrotimeConfigParser(ConfigParser):
    """:class:`ConfigParser` with readers for logging levels and optional dates."""

    def getlogginglevel(self, section: str, option: str) -> int:
        """Read a level name such as ``INFO``, unknown names map to ``NOTSET``."""
        level = logging.getLevelName(self.get(section, option).strip().upper())
        return level if isinstance(level, int) else logging.NOTSET

    def getoptionaldate(self, section: str, option: str) -> date | None:
        """Read an ISO date, where ``none``, ``null`` or an empty value mean no date."""
        value = self.get(section, option).strip()
        if value.lower() in ("", "none", "null"):
            return None
        return date.fromisoformat(value)


class BehavioralConfig:
    """Shared configuration, with one :class:`.SubConfig` attribute per section."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    OPTIONS: Final[dict[str, dict[str, ConfigOption]]] = {
        "logging": {
            "OutputLocation": ConfigOption("stdout", "get"),
            "Level": ConfigOption(logging.DEBUG, "getlogginglevel"),
            "MaxFileSize": ConfigOption(1048576, "getint"),
            "MaxFileCount": ConfigOption(50, "getint"),
            "AllowMultipleHandlers": ConfigOption(False, "getboolean"),
        },
        "leap_seconds": {
            "LoaderName": ConfigOption("ModuleDotDatLeapSecondLoader", "get"),
            "LoaderLocation": ConfigOption("leap_seconds.dat", "get"),
            "ValidUntil": ConfigOption(None, "getoptionaldate"),
        },
        "eop": {
            "LoaderName": ConfigOption("RemoteDotDatEOPLoader", "get"),
            "LoaderLocation": ConfigOption("https://celestrak.org/SpaceData/EOP-All.txt", "get"),
        },
    }
    """``dict``: every known option, by section."""

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Read the settings and make this the shared instance.

        Args:
            config_file_path (``str``, optional): custom config file. The packaged defaults are
                read if not given. A path that doesn't exist leaves every option at its default.
        """
        self._parser = AstrotimeConfigParser()
        if config_file_path is None:
            self._readPackagedDefaults()
        elif Path(config_file_path).exists():
            with open(config_file_path, encoding="utf-8") as config_file:
                self._parser.read_file(config_file)

        for section, options in self.OPTIONS.items():
            sub_config = SubConfig(section)
            for name, option in options.items():
                sub_config.setonce(name, self._readOption(section, name, option))
            setattr(self, section, sub_config)

        BehavioralConfig.__shared_inst = self

    def _readPackagedDefaults(self):
        resource = resources.files("astrotime.common").joinpath(self.DEFAULT_CONFIG_FILE)
        with resource.open("r", encoding="utf-8") as config_file:
            self._parser.read_file(config_file)

    def _readOption(self, section: str, name: str, option: ConfigOption) -> Any:
        """Parse one option, returning its default if the file doesn't set it."""
        try:
            return getattr(self._parser, option.reader)(section, name)
        except ConfigError:
            return option.default

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return the shared configuration, reading it on the first call.

        The first call reads `config_file_path`, else the file named by ``ASTROTIME_BEHAVIOR_CONFIG``,
        else the packaged defaults. Later calls ignore `config_file_path`.
        """
        if cls.__shared_inst is None:
            cls(config_file_path or os.environ.get(CONFIG_ENV_VARIABLE) or None)
        return cls.__shared_inst
