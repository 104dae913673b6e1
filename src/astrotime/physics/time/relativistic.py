"""Relativistic offsets between the terrestrial, geocentric and barycentric time scales.

TDB - TT is evaluated from a truncated version of the Fairhead & Bretagnon (1990) analytical
series: the largest periodic terms of orders T^0, T^1 & T^2 are kept, which keeps the error of the
geocentric part at the microsecond level. When the location of the observer is known, the
topocentric (diurnal) terms are added as well.

References:
    #. Fairhead, L. & Bretagnon, P., Astron.Astrophys., 229, 240-247 (1990)
    #. IERS Conventions (2010), Chapter 10
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass

# Third Party Imports
from numpy import array, cos, fmod, sin

# Local Imports
from .. import constants as const

# Columns: amplitude (s), frequency (rad per Julian millennium), phase (rad)
FAIRHEAD_T0 = array(
    [
        [1656.674564e-6, 6283.075849991, 6.240054195],
        [22.417471e-6, 5753.384884897, 4.296977442],
        [13.839792e-6, 12566.151699983, 6.196904410],
        [4.770086e-6, 529.690965095, 0.444401603],
        [4.676740e-6, 6069.776754553, 4.021195093],
        [2.256707e-6, 213.299095438, 5.543113262],
        [1.694205e-6, -3.523118349, 5.025132748],
        [1.554905e-6, 77713.771467920, 5.198467090],
        [1.276839e-6, 7860.419392439, 5.988822341],
        [1.193379e-6, 5223.693919802, 3.649823730],
        [1.115322e-6, 3930.209696220, 1.422745069],
        [0.794185e-6, 11506.769769794, 2.322313077],
        [0.447061e-6, 26.298319800, 3.615796498],
        [0.435206e-6, -398.149003408, 4.349338347],
        [0.600309e-6, 1577.343542448, 2.678271909],
        [0.496817e-6, 6208.294251424, 5.696701824],
        [0.486306e-6, 5884.926846583, 0.520007179],
        [0.432392e-6, 74.781598567, 2.435898309],
        [0.468597e-6, 6244.942814354, 5.866398759],
        [0.375510e-6, 5507.553238667, 4.103476804],
    ],
)
"""``numpy.ndarray``: leading periodic terms of TDB - TT independent of time."""

FAIRHEAD_T1 = array(
    [
        [102.156724e-6, 6283.075849991, 4.249032005],
        [1.706807e-6, 12566.151699983, 4.205904248],
        [0.269668e-6, 213.299095438, 3.400290479],
        [0.265919e-6, 529.690965095, 5.836047367],
        [0.210568e-6, -3.523118349, 6.262738348],
        [0.077996e-6, 5223.693919802, 4.670344204],
    ],
)
"""``numpy.ndarray``: leading periodic terms of TDB - TT proportional to T."""

FAIRHEAD_T2 = array(
    [
        [4.322990e-6, 6283.075849991, 2.642893748],
    ],
)
"""``numpy.ndarray``: leading periodic term of TDB - TT proportional to T^2."""

# Adjustments to the planetary terms to use the JPL DE405 masses (amplitude, frequency, phase)
PLANETARY_CORRECTIONS = array(
    [
        [0.00065e-6, 6069.776754, 4.021194],
        [0.00033e-6, 213.299095, 5.543132],
        [-0.00196e-6, 6208.294251, 5.696701],
        [-0.00173e-6, 74.781599, 2.435900],
    ],
)
PLANETARY_QUADRATIC = 0.03638e-6


@dataclass(frozen=True)
class ObserverPosition:
    """Location of an observer, used for the topocentric part of TDB - TT."""

    ut: float
    """float: universal time (UT1) as a fraction of the day."""

    elong: float
    """float: east longitude of the observer (radians)."""

    u: float
    """float: distance from the Earth spin axis (km)."""

    v: float
    """float: distance north of the equatorial plane (km)."""


def _periodicSum(terms, t: float) -> float:
    """Evaluate ``sum(A * sin(w * t + phi))`` over the rows of `terms`."""
    return float((terms[:, 0] * sin(terms[:, 1] * t + terms[:, 2])).sum())


def topocentricTerms(t: float, observer: ObserverPosition) -> float:
    """Return the observer dependent part of TDB - TT (seconds).

    Args:
        t (``float``): TDB in Julian millennia since J2000
        observer (:class:`.ObserverPosition`): position of the observer

    Returns:
        ``float``: topocentric contribution, seconds
    """
    # Local solar time and fundamental arguments (radians)
    tsol = fmod(observer.ut, 1.0) * const.TWOPI + observer.elong
    w = t / 3600.0
    elsun = fmod(280.46645683 + 1296027711.03429 * w, 360.0) * const.DEG2RAD
    emsun = fmod(357.52910918 + 1295965810.481 * w, 360.0) * const.DEG2RAD
    d = fmod(297.85019547 + 16029616012.090 * w, 360.0) * const.DEG2RAD
    elj = fmod(34.35151874 + 109306899.89453 * w, 360.0) * const.DEG2RAD
    els = fmod(50.07744430 + 44046398.47038 * w, 360.0) * const.DEG2RAD

    u, v = observer.u, observer.v
    return float(
        0.00029e-10 * u * sin(tsol + elsun - els)
        + 0.00100e-10 * u * sin(tsol - 2.0 * emsun)
        + 0.00133e-10 * u * sin(tsol - d)
        + 0.00133e-10 * u * sin(tsol + elsun - elj)
        - 0.00229e-10 * u * sin(tsol + 2.0 * elsun + emsun)
        - 0.02200e-10 * v * cos(elsun + emsun)
        + 0.05312e-10 * u * sin(tsol - emsun)
        - 0.13677e-10 * u * sin(tsol + 2.0 * elsun)
        - 1.31840e-10 * v * cos(elsun)
        + 3.17679e-10 * u * sin(tsol),
    )


def tdbMinusTT(tt_seconds: float, observer: ObserverPosition | None = None) -> float:
    """Return TDB - TT (seconds) at the given instant.

    Args:
        tt_seconds (``float``): TT (or TDB, the difference is negligible here) in seconds since J2000
        observer (:class:`.ObserverPosition`, optional): position of the observer. Defaults to
            ``None``, which evaluates the geocentric series only.

    Returns:
        ``float``: TDB - TT, seconds
    """
    t = tt_seconds / (const.SECONDS_PER_DAY * const.DAYS_PER_MILLENNIUM)

    series = (
        _periodicSum(FAIRHEAD_T0, t)
        + t * _periodicSum(FAIRHEAD_T1, t)
        + t * t * _periodicSum(FAIRHEAD_T2, t)
    )
    planetary = _periodicSum(PLANETARY_CORRECTIONS, t) + PLANETARY_QUADRATIC * t * t

    if observer is None:
        return series + planetary
    return topocentricTerms(t, observer) + series + planetary


def tcgMinusTT(tt_seconds: float) -> float:
    """Return TCG - TT (seconds), with TT in seconds since J2000.

    References:
        IAU 2000 Resolution B1.9
    """
    return const.L_G * (tt_seconds - const.T0_77_SECONDS) / (1.0 - const.L_G)


def tcbMinusTDB(tdb_seconds: float) -> float:
    """Return TCB - TDB (seconds), with TDB in seconds since J2000.

    References:
        IAU 2006 Resolution B3
    """
    return (const.L_B * (tdb_seconds - const.T0_77_SECONDS) - const.TDB0) / (1.0 - const.L_B)
