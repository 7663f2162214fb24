"""CLI entry point: mprintf prints formatted information about the Moon."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, TextIO

from moonphase_tools.astro import phase
from moonphase_tools.config import get_default_format, get_log_level
from moonphase_tools.constants import DEFAULT_INTERVAL, DEFAULT_TIME_UNIT
from moonphase_tools.template import mprintf
from moonphase_tools.time_utils import interval_days, jd_from_string, jd_now

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or MOONPHASE_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = get_log_level()
    if env_level is not None:
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _positive_int(value: str) -> int:
    """argparse type: integer >= 1."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'{value!r} is not an integer') from None
    if n < 1:
        raise argparse.ArgumentTypeError(f'{value!r} must be at least 1')
    return n


def _build_parser() -> argparse.ArgumentParser:
    """Build the mprintf argument parser."""
    parser = argparse.ArgumentParser(
        prog='mprintf',
        description='Print formatted information about the Moon.',
        epilog=(
            'Format directives: %n newline, %t tab, %% percent, %a age (days), '
            '%P percent illuminated, %e glyph, %s mirrored glyph, %p phase name.'
        ),
    )
    parser.add_argument(
        '-f',
        '--format',
        type=str,
        default=None,
        help='Formatting string; env: MOONPHASE_FORMAT',
    )
    when = parser.add_mutually_exclusive_group()
    when.add_argument(
        '--date', type=str, default=None, help='UTC date/time (default: now)'
    )
    when.add_argument('--jd', type=float, default=None, help='Julian date')
    parser.add_argument(
        '--count', type=_positive_int, default=1, help='Number of instants to print'
    )
    parser.add_argument(
        '--interval', type=float, default=DEFAULT_INTERVAL, help='Step between instants'
    )
    parser.add_argument(
        '--time-unit',
        type=str,
        default=DEFAULT_TIME_UNIT,
        help='Unit of --interval: sec, min, hour or day (case-insensitive)',
    )
    parser.add_argument('-o', '--output', type=str, default=None, help='Output file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    return parser


def _write_phases(
    out: TextIO, fmt: str, start_jd: float, count: int, step_days: float
) -> None:
    """Write one formatted line per instant, starting at start_jd."""
    for k in range(count):
        jd = start_jd + k * step_days
        state = phase(jd)
        logger.debug(
            'JD %.6f: pphase=%.6f precent=%.6f mage=%.4f',
            jd,
            state.pphase,
            state.precent,
            state.mage,
        )
        out.write(mprintf(fmt, state) + '\n')


def main() -> int:
    """Entry point for the mprintf CLI.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    parser = _build_parser()
    args = parser.parse_args()
    _configure_logging(args.verbose)

    fmt = args.format if args.format is not None else get_default_format()
    try:
        if args.jd is not None:
            start_jd = args.jd
        elif args.date is not None:
            start_jd = jd_from_string(args.date)
        else:
            start_jd = jd_now()
        step_days = interval_days(args.interval, args.time_unit)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    logger.info('Start JD %.6f, %d instant(s), step %.6f days', start_jd, args.count, step_days)

    if args.output is not None:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                _write_phases(f, fmt, start_jd, args.count, step_days)
        except OSError as e:
            print(f'Error: {e}', file=sys.stderr)
            return 1
        return 0
    _write_phases(sys.stdout, fmt, start_jd, args.count, step_days)
    return 0


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
