"""Moon phase calculator and printf-style formatter.

This package provides:
- A low-precision Sun/Moon ephemeris (after John Walker's moontool) giving the
  Moon's illuminated fraction and age for a Julian date
- Classification into the eight named lunar phases
- A small template language for rendering phase names, glyphs and percentages

Date strings and the system clock are converted to Julian dates with rms-julian.
"""

from moonphase_tools.angle_utils import fixangle
from moonphase_tools.astro import MoonState, kepler, phase
from moonphase_tools.phases import MoonPhase, classify
from moonphase_tools.template import mprintf

__all__: list[str] = [
    'MoonPhase',
    'MoonState',
    'classify',
    'fixangle',
    'kepler',
    'mprintf',
    'phase',
]
