from __future__ import annotations

import pytest

from lib_log_clt.domain.environment import OutputEnvironment
from lib_log_clt.domain.symbols import CURSOR_LEFT, PADDING_TABLE, Symbol, padded, render_symbol
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]

VSCODE = (OutputEnvironment.MACOS_VSCODE, OutputEnvironment.WINDOWS_VSCODE, OutputEnvironment.UNKNOWN_VSCODE)


def test_padding_table_covers_every_symbol_and_environment() -> None:
    for symbol in Symbol:
        for environment in OutputEnvironment:
            glyph, padding = render_symbol(symbol, environment)
            assert glyph == symbol.glyph
            assert padding in {"", " ", CURSOR_LEFT}


def test_padding_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        PADDING_TABLE[Symbol.COG] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        PADDING_TABLE[Symbol.COG][OutputEnvironment.XCODE] = " "  # type: ignore[index]


@pytest.mark.parametrize("symbol", list(Symbol))
def test_xcode_never_pads(symbol: Symbol) -> None:
    assert render_symbol(symbol, OutputEnvironment.XCODE)[1] == ""


@pytest.mark.parametrize("environment", VSCODE + (OutputEnvironment.MACOS_TERMINAL,))
def test_warning_gets_one_space_where_it_renders_narrow(environment: OutputEnvironment) -> None:
    assert render_symbol(Symbol.WARNING, environment) == (Symbol.WARNING.glyph, " ")


def test_warning_unpadded_in_iterm() -> None:
    assert render_symbol(Symbol.WARNING, OutputEnvironment.MACOS_ITERM2)[1] == ""


@pytest.mark.parametrize("environment", [OutputEnvironment.WINDOWS_TERMINAL, OutputEnvironment.WINDOWS_CONSOLE])
def test_exclamation_point_steps_back_in_windows_shells(environment: OutputEnvironment) -> None:
    assert padded(Symbol.EXCLAMATION_POINT, environment) == Symbol.EXCLAMATION_POINT.glyph + "\x1b[1D"


def test_speaker_padding_includes_iterm_and_windows_shells() -> None:
    padded_in = {environment for environment in OutputEnvironment if render_symbol(Symbol.SPEAKER, environment)[1] == " "}

    assert OutputEnvironment.MACOS_ITERM2 in padded_in
    assert OutputEnvironment.WINDOWS_CONSOLE in padded_in
    assert OutputEnvironment.UNKNOWN not in padded_in


def test_glyphs_carry_variation_selector_where_needed() -> None:
    assert Symbol.WARNING.glyph.endswith("\ufe0f")
    assert Symbol.COG.glyph == "\u2699\ufe0f"


_E = OutputEnvironment
_SPACE_ON_VSCODE_AND_TERMINAL = frozenset({*VSCODE, _E.MACOS_TERMINAL})
_SPACE_ON_SPEAKER_HOSTS = frozenset({*VSCODE, _E.WINDOWS_TERMINAL, _E.WINDOWS_CONSOLE, _E.MACOS_TERMINAL, _E.MACOS_ITERM2})
_WINDOWS_SHELLS = frozenset({_E.WINDOWS_TERMINAL, _E.WINDOWS_CONSOLE})

EXPECTED_PADDING: dict[Symbol, tuple[str, frozenset[OutputEnvironment]]] = {
    Symbol.COG: (" ", _SPACE_ON_VSCODE_AND_TERMINAL),
    Symbol.WARNING: (" ", _SPACE_ON_VSCODE_AND_TERMINAL),
    Symbol.DOUBLE_EXCLAMATION_POINT: (" ", _SPACE_ON_VSCODE_AND_TERMINAL),
    Symbol.RED_HEART: (" ", _SPACE_ON_VSCODE_AND_TERMINAL),
    Symbol.SPEAKER: (" ", _SPACE_ON_SPEAKER_HOSTS),
    Symbol.EXCLAMATION_POINT: (CURSOR_LEFT, _WINDOWS_SHELLS),
    Symbol.GREY_HEART: (" ", frozenset(VSCODE)),
    Symbol.PINK_HEART: (" ", frozenset(VSCODE)),
    Symbol.LIGHT_BLUE_HEART: (" ", frozenset(VSCODE)),
    Symbol.POO: ("", frozenset()),
    Symbol.NOTEBOOK: ("", frozenset()),
    Symbol.EYEBROW: ("", frozenset()),
    Symbol.RED_CROSS: ("", frozenset()),
    Symbol.POLICE_LIGHT: ("", frozenset()),
    Symbol.LADYBUG: ("", frozenset()),
    Symbol.ORANGE_DIAMOND: ("", frozenset()),
    Symbol.ORANGE_HEART: ("", frozenset()),
    Symbol.YELLOW_HEART: ("", frozenset()),
    Symbol.GREEN_HEART: ("", frozenset()),
    Symbol.BLUE_HEART: ("", frozenset()),
    Symbol.PURPLE_HEART: ("", frozenset()),
    Symbol.BLACK_HEART: ("", frozenset()),
    Symbol.BROWN_HEART: ("", frozenset()),
    Symbol.WHITE_HEART: ("", frozenset()),
}


def test_expected_table_lists_every_symbol() -> None:
    assert set(EXPECTED_PADDING) == set(Symbol)


@pytest.mark.parametrize("environment", list(OutputEnvironment), ids=lambda environment: environment.value)
@pytest.mark.parametrize("symbol", list(Symbol), ids=lambda symbol: symbol.name)
def test_padding_matches_expected_table(symbol: Symbol, environment: OutputEnvironment) -> None:
    padding, applies_to = EXPECTED_PADDING[symbol]
    expected = padding if environment in applies_to else ""

    assert PADDING_TABLE[symbol][environment] == expected
