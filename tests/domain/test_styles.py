from __future__ import annotations

import pytest

from lib_log_clt.domain.environment import OutputEnvironment
from lib_log_clt.domain.levels import LogLevel
from lib_log_clt.domain.styles import RESET, PrefixTable, Style, coerce_style, level_symbol, resolve_prefixes, resolve_style
from lib_log_clt.domain.symbols import Symbol
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_text_prefixes_flag_warnings_and_above() -> None:
    table = resolve_prefixes(Style.TEXT, OutputEnvironment.UNKNOWN, is_terminal=False)

    assert table.prefix_for(LogLevel.INFO) == "INFO: "
    assert table.prefix_for(LogLevel.WARNING) == "*** WARNING: "
    assert table.prefix_for(LogLevel.CRITICAL) == "*** CRITICAL: "
    assert table.suffix == ""


def test_none_style_renders_no_prefix_for_any_level() -> None:
    table = resolve_prefixes(Style.NONE, OutputEnvironment.MACOS_ITERM2, is_terminal=True)

    assert all(table.prefix_for(level) == "" for level in LogLevel)
    assert table.suffix == ""


def test_color_style_resets_after_each_line() -> None:
    table = resolve_prefixes(Style.COLOR, OutputEnvironment.UNKNOWN, is_terminal=True)

    assert table.suffix == RESET == "\x1b[0m"
    assert table.prefix_for(LogLevel.ERROR) == "\x1b[31mERROR: "
    assert table.prefix_for(LogLevel.TRACE) == "\x1b[2;37mTRACE: "


def test_emoji_prefix_applies_environment_padding() -> None:
    terminal = resolve_prefixes(Style.EMOJI, OutputEnvironment.MACOS_TERMINAL, is_terminal=True)
    xcode = resolve_prefixes(Style.EMOJI, OutputEnvironment.XCODE, is_terminal=False)

    assert terminal.prefix_for(LogLevel.WARNING) == Symbol.WARNING.glyph + "  "
    assert xcode.prefix_for(LogLevel.WARNING) == Symbol.WARNING.glyph + " "
    assert level_symbol(LogLevel.DEBUG) is Symbol.COG


@pytest.mark.parametrize(
    "environment, terminal, force, no_color, expected",
    [
        (OutputEnvironment.XCODE, True, True, False, Style.EMOJI),
        (OutputEnvironment.MACOS_ITERM2, True, False, False, Style.COLOR),
        (OutputEnvironment.UNKNOWN, False, False, False, Style.EMOJI),
        (OutputEnvironment.UNKNOWN, False, True, False, Style.COLOR),
        (OutputEnvironment.UNKNOWN, True, False, True, Style.EMOJI),
    ],
)
def test_auto_resolution(
    environment: OutputEnvironment, terminal: bool, force: bool, no_color: bool, expected: Style
) -> None:
    resolved = resolve_style(Style.AUTO, environment, is_terminal=terminal, force_color=force, no_color=no_color)

    assert resolved is expected


def test_explicit_color_demotes_to_text_under_no_color() -> None:
    assert resolve_style(Style.COLOR, OutputEnvironment.UNKNOWN, is_terminal=True, no_color=True) is Style.TEXT
    assert resolve_style(Style.COLOR, OutputEnvironment.UNKNOWN, is_terminal=False) is Style.COLOR


def test_prefix_table_is_immutable_and_concrete() -> None:
    table = resolve_prefixes(Style.TEXT, OutputEnvironment.UNKNOWN, is_terminal=False)

    with pytest.raises(TypeError):
        table.prefixes[LogLevel.INFO] = "x"  # type: ignore[index]
    with pytest.raises(ValueError, match="concrete style"):
        PrefixTable(style=Style.AUTO)


@pytest.mark.parametrize("name, expected", [("colour", Style.COLOR), (" Emoji ", Style.EMOJI), ("none", Style.NONE)])
def test_style_names(name: str, expected: Style) -> None:
    assert coerce_style(name) is expected


def test_unknown_style_name_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown console style"):
        Style.from_name("sparkles")
