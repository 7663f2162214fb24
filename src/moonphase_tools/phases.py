"""Named lunar phases: classification of a MoonState into one of eight buckets."""

from __future__ import annotations

from enum import Enum

from moonphase_tools.constants import (
    CRESCENT_MAX_FRACTION,
    GIBBOUS_MAX_FRACTION,
    HALF_SYNMONTH,
    NEW_MAX_FRACTION,
    QUARTER_MAX_FRACTION,
)


class MoonPhase(Enum):
    """The eight conventional phases, in cycle order starting at new Moon.

    Each value is (English name, glyph as seen from the northern hemisphere,
    mirrored glyph as seen from the southern hemisphere).
    """

    NEW = ('New', '\U0001F311', '\U0001F311')
    WAXING_CRESCENT = ('Waxing Crescent', '\U0001F312', '\U0001F318')
    FIRST_QUARTER = ('First Quarter', '\U0001F313', '\U0001F317')
    WAXING_GIBBOUS = ('Waxing Gibbous', '\U0001F314', '\U0001F316')
    FULL = ('Full', '\U0001F315', '\U0001F315')
    WANING_GIBBOUS = ('Waning Gibbous', '\U0001F316', '\U0001F314')
    LAST_QUARTER = ('Last Quarter', '\U0001F317', '\U0001F313')
    WANING_CRESCENT = ('Waning Crescent', '\U0001F318', '\U0001F312')

    @property
    def label(self) -> str:
        """English phase name (e.g. 'Waxing Gibbous')."""
        return self.value[0]

    @property
    def emoji(self) -> str:
        """Phase glyph (northern-hemisphere orientation)."""
        return self.value[1]

    @property
    def alt_emoji(self) -> str:
        """Mirrored phase glyph (southern-hemisphere orientation)."""
        return self.value[2]


def is_waning(mage: float) -> bool:
    """Return True when the Moon's age is past half a synodic month."""
    return mage > HALF_SYNMONTH


def classify(pphase: float, mage: float) -> MoonPhase:
    """Classify illuminated fraction and age into a named phase.

    New and full are decided by illuminated fraction alone; the other six
    buckets are split into waxing and waning halves by the Moon's age.

    Parameters:
        pphase: Illuminated fraction, 0 to 1.
        mage: Age of the Moon in days.

    Returns:
        The matching MoonPhase.
    """
    if pphase < NEW_MAX_FRACTION:
        return MoonPhase.NEW
    if pphase >= GIBBOUS_MAX_FRACTION:
        return MoonPhase.FULL
    waning = is_waning(mage)
    if pphase < CRESCENT_MAX_FRACTION:
        return MoonPhase.WANING_CRESCENT if waning else MoonPhase.WAXING_CRESCENT
    if pphase < QUARTER_MAX_FRACTION:
        return MoonPhase.LAST_QUARTER if waning else MoonPhase.FIRST_QUARTER
    return MoonPhase.WANING_GIBBOUS if waning else MoonPhase.WAXING_GIBBOUS
