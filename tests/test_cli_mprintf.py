"""Tests for mprintf CLI argument parsing and output."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from moonphase_tools.cli import main as cli_main


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, 'argv', ['mprintf', *argv])
    return cli_main.main()


def test_cli_jd_and_format(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """--jd and --format select the instant and the rendering."""
    rc = _run(monkeypatch, '--jd', '2460740.165938', '-f', '%P%% %p')
    assert rc == 0
    assert capsys.readouterr().out == '39.41% Waxing Crescent\n'


def test_cli_default_format_from_env(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without --format the MOONPHASE_FORMAT template is used."""
    monkeypatch.setenv('MOONPHASE_FORMAT', '%p')
    assert _run(monkeypatch, '--jd', '2460740.165938') == 0
    assert capsys.readouterr().out == 'Waxing Crescent\n'


def test_cli_uses_clock_by_default(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """With no date the current instant is used."""
    monkeypatch.setattr(cli_main, 'jd_now', lambda: 2460740.165938)
    assert _run(monkeypatch, '-f', '%P') == 0
    assert capsys.readouterr().out == '39.41\n'


def test_cli_date_string(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """--date is converted through the clock adapter."""
    seen: list[str] = []

    def _fake_jd_from_string(s: str) -> float:
        seen.append(s)
        return 2460740.165938

    monkeypatch.setattr(cli_main, 'jd_from_string', _fake_jd_from_string)
    assert _run(monkeypatch, '--date', '2025-03-05 15:58:57', '-f', '%P') == 0
    assert seen == ['2025-03-05 15:58:57']
    assert capsys.readouterr().out == '39.41\n'


def test_cli_bad_date(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """An unparsable date exits 1 with an error on stderr."""
    monkeypatch.setattr('moonphase_tools.time_utils.parse_datetime', lambda _s: None)
    assert _run(monkeypatch, '--date', 'yesterday-ish') == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith('Error: Unable to parse')


def test_cli_series(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """--count prints one line per step of --interval/--time-unit."""
    rc = _run(
        monkeypatch, '--jd', '2460740.0', '--count', '4', '--interval', '12', '--time-unit', 'hour',
        '-f', '%P',
    )
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    values = [float(v) for v in lines]
    assert values == sorted(values)


def test_cli_rejects_zero_count(monkeypatch: pytest.MonkeyPatch) -> None:
    """--count must be positive; argparse exits with status 2."""
    with pytest.raises(SystemExit) as excinfo:
        _run(monkeypatch, '--jd', '2460740.0', '--count', '0')
    assert excinfo.value.code == 2


def test_cli_date_and_jd_are_exclusive(monkeypatch: pytest.MonkeyPatch) -> None:
    """--date and --jd cannot be combined."""
    with pytest.raises(SystemExit) as excinfo:
        _run(monkeypatch, '--jd', '2460740.0', '--date', '2025-03-05')
    assert excinfo.value.code == 2


def test_cli_time_unit_long_form(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Unit names match on their first characters, case-insensitively."""
    rc = _run(
        monkeypatch, '--jd', '2460740.165938', '--count', '2', '--interval', '24',
        '--time-unit', 'HOURS', '-f', '%P',
    )
    assert rc == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == '39.41'
    assert len(lines) == 2


def test_cli_invalid_time_unit(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """An unknown unit exits 1 with an error on stderr."""
    assert _run(monkeypatch, '--jd', '2460740.0', '--time-unit', 'fortnight') == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith('Error: Invalid time_unit')


def test_cli_output_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """-o writes the formatted lines to a file."""
    out = tmp_path / 'moon.txt'
    assert _run(monkeypatch, '--jd', '2460740.165938', '-f', '%e %p', '-o', str(out)) == 0
    assert out.read_text(encoding='utf-8') == '\U0001F312 Waxing Crescent\n'


def test_cli_truncates_unknown_directive(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Unknown directives cut the line short but still exit 0."""
    assert _run(monkeypatch, '--jd', '2460740.165938', '-f', 'moon %z rest') == 0
    assert capsys.readouterr().out == 'moon \n'
