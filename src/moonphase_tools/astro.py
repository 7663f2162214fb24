"""Low-precision Sun and Moon positions and the Moon's phase (after moontool.c).

The algorithms follow Peter Duffett-Smith, "Practical Astronomy With Your
Calculator", 2nd ed., Cambridge University Press, 1981, as adapted by John
Walker in moontool (http://www.fourmilab.ch/moontool/). Accuracy is that of a
moon-phase calendar: phase times are good to a few hours.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from moonphase_tools.angle_utils import fixangle
from moonphase_tools.constants import (
    DEGREES_PER_CIRCLE,
    ECCENT,
    ELONGE,
    ELONGP,
    EPOCH,
    KEPLER_MAX_ITERATIONS,
    KEPLER_TOLERANCE,
    MOON_MEAN_ANOMALY_RATE_OFFSET,
    MOON_MEAN_LONGITUDE_EPOCH,
    MOON_MEAN_LONGITUDE_RATE,
    MOON_PERIGEE_LONGITUDE_EPOCH,
    SYNMONTH,
    TROPICAL_YEAR_DAYS,
)


@dataclass(frozen=True)
class MoonState:
    """Phase of the Moon at one instant.

    Attributes:
        pphase: Illuminated fraction of the disc, 0 (new) to 1 (full).
        precent: Position within the synodic month as a fraction of a cycle, [0, 1).
        mage: Age of the Moon in days since the last new Moon.
    """

    pphase: float
    precent: float
    mage: float


def kepler(m: float, ecc: float) -> float:
    """Solve Kepler's equation E - ecc*sin(E) = M by Newton-Raphson.

    One step is always taken; iteration continues while the residual of the
    previous iterate exceeds KEPLER_TOLERANCE. The current approximation is
    returned as is after KEPLER_MAX_ITERATIONS, or when the derivative of the
    equation vanishes (only possible for ecc >= 1).

    Parameters:
        m: Mean anomaly in degrees.
        ecc: Orbital eccentricity, 0 <= ecc < 1.

    Returns:
        Eccentric anomaly in radians.
    """
    m = math.radians(m)
    e = m
    iterations = 0
    while True:
        delta = e - ecc * math.sin(e) - m
        slope = 1.0 - ecc * math.cos(e)
        if slope == 0.0:
            return e
        e -= delta / slope
        iterations += 1
        if abs(delta) <= KEPLER_TOLERANCE or iterations >= KEPLER_MAX_ITERATIONS:
            return e


def phase(pdate: float) -> MoonState:
    """Compute the phase of the Moon for a Julian date.

    Parameters:
        pdate: Julian date and fraction (UTC).

    Returns:
        MoonState with the illuminated fraction, the fraction of the synodic
        cycle elapsed, and the Moon's age in days.
    """
    # Sun's position
    day = pdate - EPOCH
    # Mean anomaly, converted from perigee co-ordinates to epoch 1980.0
    m = fixangle(fixangle((DEGREES_PER_CIRCLE / TROPICAL_YEAR_DAYS) * day) + ELONGE - ELONGP)
    ec = kepler(m, ECCENT)
    ec = math.sqrt((1.0 + ECCENT) / (1.0 - ECCENT)) * math.tan(ec / 2.0)
    ec = 2.0 * math.degrees(math.atan(ec))  # true anomaly
    lambdasun = fixangle(ec + ELONGP)  # Sun's geocentric ecliptic longitude

    # Moon's mean longitude and mean anomaly
    ml = fixangle(MOON_MEAN_LONGITUDE_RATE * day + MOON_MEAN_LONGITUDE_EPOCH)
    mm = fixangle(ml - MOON_MEAN_ANOMALY_RATE_OFFSET * day - MOON_PERIGEE_LONGITUDE_EPOCH)

    # Evection
    ev = 1.2739 * math.sin(math.radians(2.0 * (ml - lambdasun) - mm))
    # Annual equation
    ae = 0.1858 * math.sin(math.radians(m))
    # Corrected anomaly
    mmp = mm + ev - ae - (0.37 * math.sin(math.radians(m)))
    # Corrected longitude
    lp = (
        ml
        + ev
        + (6.2886 * math.sin(math.radians(mmp)))
        - ae
        + (0.214 * math.sin(math.radians(2.0 * mmp)))
    )
    # True longitude (variation)
    lpp = lp + (0.6583 * (2.0 * math.sin(math.radians(lp - lambdasun))))

    # Age of the Moon in degrees
    moonage = lpp - lambdasun

    return MoonState(
        pphase=(1.0 - math.cos(math.radians(moonage))) / 2.0,
        precent=fixangle(moonage) / DEGREES_PER_CIRCLE,
        mage=SYNMONTH * (fixangle(moonage) / DEGREES_PER_CIRCLE),
    )
