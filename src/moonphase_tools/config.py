"""Configuration: default template, leap-seconds file and log level from environment."""

import os

from moonphase_tools.constants import DEFAULT_FORMAT

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_default_format() -> str:
    """Return the default output template (MOONPHASE_FORMAT env var or built-in).

    Returns:
        Template string for mprintf.
    """
    return os.environ.get('MOONPHASE_FORMAT', '') or DEFAULT_FORMAT


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Prefers MOONPHASE_LEAPSECS, then JULIAN_LEAPSECS.

    Returns:
        Path string, or None to use rms-julian's bundled LSK.
    """
    for name in ('MOONPHASE_LEAPSECS', 'JULIAN_LEAPSECS'):
        path = os.environ.get(name, '').strip()
        if path:
            return path
    return None


def get_log_level() -> str | None:
    """Return log level name from MOONPHASE_LOG, or None when unset or invalid."""
    level = os.environ.get('MOONPHASE_LOG', '').strip().upper()
    if level in LOG_LEVELS:
        return level
    return None
