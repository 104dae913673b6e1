"""High precision astronomical epochs and time scale conversions.

The public API lives in :mod:`astrotime.physics.time`:

.. code-block:: python

    from astrotime.physics.time import UTCEpoch

    epoch = UTCEpoch.fromComponents(2016, 12, 31, 23, 59, 60.5)
    epoch.convertScale("TT")

Leap seconds are read from the table bundled with the package, and UT1 - UTC from the Earth
orientation data configured in :mod:`astrotime.common.behavioral_config`.
"""

from __future__ import annotations

__version__ = "1.0.0"
