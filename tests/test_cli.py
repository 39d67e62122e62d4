"""CLI behaviour coverage for the click command group."""

from __future__ import annotations

import re

import pytest
from click.testing import CliRunner

from lib_log_clt import __init__conf__, summary_info
from lib_log_clt import cli as cli_mod
from lib_log_clt.domain.symbols import Symbol

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def run_cli(args: list[str] | None = None, **kwargs: object) -> tuple[int, str, BaseException | None]:
    """Invoke the command group with ``CliRunner`` and capture output."""

    runner = CliRunner()
    result = runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command, **kwargs)
    return result.exit_code, result.output, result.exception


def test_cli_without_subcommand_prints_summary() -> None:
    exit_code, stdout, _ = run_cli()

    assert exit_code == 0
    assert stdout == summary_info()


def test_cli_info_command_matches_summary() -> None:
    exit_code, stdout, _ = run_cli(["info"])

    assert exit_code == 0
    assert stdout == summary_info()
    assert "Info for lib_log_clt" in stdout


def test_cli_version_flag() -> None:
    exit_code, stdout, _ = run_cli(["--version"])

    assert exit_code == 0
    assert __init__conf__.version in stdout


def test_demo_emits_one_line_per_level() -> None:
    exit_code, stdout, exception = run_cli(["demo", "--style", "text", "-m", "run=7"])

    assert exception is None
    assert exit_code == 0
    for line in (
        'TRACE: [run: "7"] trace message',
        'NOTICE: [run: "7"] notice message',
        '*** CRITICAL: [run: "7"] critical message',
    ):
        assert line in stdout


def test_demo_respects_level_threshold() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--style", "none", "--level", "error"])

    assert exit_code == 0
    assert "warning message" not in stdout
    assert "error message" in stdout
    assert "critical message" in stdout


def test_demo_color_style_wraps_lines_in_sgr_codes() -> None:
    exit_code, stdout, _ = run_cli(["demo", "--style", "color", "--level", "info"])

    assert exit_code == 0
    assert "\x1b[32mINFO: info message\x1b[0m" in stdout
    assert strip_ansi(stdout).splitlines()[0] == "INFO: info message"


def test_demo_rejects_malformed_metadata() -> None:
    exit_code, stdout, _ = run_cli(["demo", "-m", "no-equals-sign"])

    assert exit_code == 2
    assert "expected key=value" in stdout


def test_symbols_lists_catalog_for_selected_environment() -> None:
    exit_code, stdout, _ = run_cli(["symbols", "--environment", "windows-console"], env={"COLUMNS": "120"})

    assert exit_code == 0
    assert "windows-console" in stdout
    for symbol in (Symbol.POO, Symbol.EXCLAMATION_POINT, Symbol.LIGHT_BLUE_HEART):
        assert symbol.name in stdout
    assert "'\\x1b[1D'" in stdout


def test_symbols_rejects_unknown_environment() -> None:
    exit_code, _stdout, _ = run_cli(["symbols", "--environment", "amiga"])

    assert exit_code == 2


def test_env_command_reports_both_streams(monkeypatch: pytest.MonkeyPatch) -> None:
    exit_code, stdout, _ = run_cli(["env"], env={"COLUMNS": "120"})

    assert exit_code == 0
    assert "stdout" in stdout
    assert "stderr" in stdout


def test_main_returns_exit_codes(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["info"]) == 0
    assert "Info for lib_log_clt" in capsys.readouterr().out

    assert cli_mod.main(["demo", "--style", "sparkles"]) == 2
    assert "Invalid value" in capsys.readouterr().err


def test_main_help_exits_cleanly(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["--help"]) == 0
    assert "demo" in capsys.readouterr().out
