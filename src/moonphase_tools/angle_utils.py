"""Angle normalization used throughout the ephemeris computation."""

from __future__ import annotations

import math

from moonphase_tools.constants import DEGREES_PER_CIRCLE


def fixangle(a: float) -> float:
    """Reduce an angle to the range [0, 360) degrees.

    Uses floor-based reduction so negative angles wrap upward (e.g. -30 -> 330)
    rather than being truncated toward zero.

    Parameters:
        a: Angle in degrees (any finite value).

    Returns:
        Equivalent angle in [0, 360).
    """
    result = a - DEGREES_PER_CIRCLE * math.floor(a / DEGREES_PER_CIRCLE)
    # Tiny negative angles round up to exactly 360.0.
    if result >= DEGREES_PER_CIRCLE:
        return 0.0
    return result
