"""Clock and date-string to Julian date conversion, built on rms-julian."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from datetime import datetime, timezone

import julian

from moonphase_tools.config import get_leapsecs_path
from moonphase_tools.constants import (
    J2000_MIDNIGHT_JD,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False

_YEAR_CLOCK = re.compile(r'(?P<year>\d{4})\s+(?P<clock>\d{1,2}:\d{2}:\d{2})')

# Step-size units, keyed by their first four lowercase characters.
_UNIT_SECONDS: dict[str, float] = {
    'sec': 1.0,
    'seco': 1.0,
    'min': SECONDS_PER_MINUTE,
    'minu': SECONDS_PER_MINUTE,
    'hour': SECONDS_PER_HOUR,
    'day': SECONDS_PER_DAY,
    'days': SECONDS_PER_DAY,
}


def _ensure_leapsecs() -> None:
    """Load the leap seconds kernel if not already loaded.

    Uses the configured NAIF LSK when one is set and readable; otherwise falls
    back to rms-julian's bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info(
                'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
                path,
                e,
            )
    julian.load_lsk()
    _leapsecs_loaded = True


def parse_datetime(string: str) -> tuple[int, float] | None:
    """Parse a date/time string to UTC (day, sec).

    Parameters:
        string: Date/time string (any format accepted by rms-julian, plus a
            trailing 'Z' and the 'YYYY HH:MM:SS' form).

    Returns:
        (day, sec) where day is days since J2000 and sec is seconds within
        that day; None on parse failure.
    """
    _ensure_leapsecs()
    for text in _date_spellings(string):
        try:
            day, sec = julian.day_sec_from_string(text)[:2]
        except (ValueError, TypeError, LookupError, OSError):
            logger.debug('rms-julian rejected %r', text)
            continue
        return (int(day), float(sec))
    return None


def _date_spellings(string: str) -> Iterator[str]:
    """Yield the user's date string, then rewrites rms-julian understands."""
    yield string
    text = string.strip()
    # ISO UTC designator: the value is UTC either way.
    if text[-1:] in ('Z', 'z'):
        yield text[:-1]
    # Bare year and clock time: January 1st of that year.
    match = _YEAR_CLOCK.fullmatch(text)
    if match:
        yield f'{match["year"]}-01-01 {match["clock"]}'


def jd_from_day_sec(day: int, sec: float) -> float:
    """Convert UTC (day, sec) to a Julian date.

    Parameters:
        day: Days since J2000 (2000-01-01 is day 0).
        sec: Seconds within that day.

    Returns:
        Julian date and fraction.
    """
    return J2000_MIDNIGHT_JD + day + sec / SECONDS_PER_DAY


def jd_from_datetime(dt: datetime) -> float:
    """Convert a datetime to a Julian date. Naive datetimes are taken as UTC."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    day = int(julian.day_from_ymd(dt.year, dt.month, dt.day))
    sec = (
        dt.hour * SECONDS_PER_HOUR
        + dt.minute * SECONDS_PER_MINUTE
        + dt.second
        + dt.microsecond / 1e6
    )
    return jd_from_day_sec(day, sec)


def jd_now() -> float:
    """Return the Julian date of the current wall-clock instant."""
    return jd_from_datetime(datetime.now(timezone.utc))


def jd_from_string(string: str) -> float:
    """Parse a date/time string to a Julian date.

    Parameters:
        string: Date/time string (see parse_datetime).

    Returns:
        Julian date and fraction.

    Raises:
        ValueError: If the string cannot be parsed.
    """
    parsed = parse_datetime(string)
    if parsed is None:
        raise ValueError(f'Unable to parse date/time {string!r}')
    return jd_from_day_sec(*parsed)


def interval_days(interval: float, time_unit: str) -> float:
    """Convert interval and time_unit to days.

    Units are matched on their first four characters, case-insensitively,
    so 'hours', 'DAY' and 'minutes' are all accepted.

    Parameters:
        interval: Step between instants (sign is ignored).
        time_unit: 'sec', 'min', 'hour' or 'day', or a longer spelling.

    Returns:
        Step in days.

    Raises:
        ValueError: If time_unit is not a recognized unit.
    """
    unit_seconds = _UNIT_SECONDS.get(time_unit.strip().lower()[:4])
    if unit_seconds is None:
        raise ValueError(f'Invalid time_unit {time_unit!r}; expected one of sec, min, hour, day')
    return abs(interval) * unit_seconds / SECONDS_PER_DAY
