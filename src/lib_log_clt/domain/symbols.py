"""Emoji catalog and per-environment corrective padding.

Purpose
-------
Terminals disagree on how wide an emoji is. Some render a glyph in one cell
while advancing the cursor by two (the next character then overlaps), others
render it two cells wide but advance by one. The table below records, for
every glyph in the catalog and every :class:`OutputEnvironment`, the string
appended after the glyph so the text that follows lines up.

Contents
--------
* :class:`Symbol` – the closed glyph catalog.
* :data:`PADDING_TABLE` – read-only ``symbol -> environment -> padding`` map.
* :func:`render_symbol` / :func:`padded` – lookups used by the style resolver.

System Role
-----------
Pure domain data. The table is built eagerly at import time and verified to
cover every pair, so a missing case fails loudly instead of rendering
misaligned output.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from .environment import OutputEnvironment

NO_PADDING = ""
ONE_SPACE = " "
CURSOR_LEFT = "\x1b[1D"
"""Move the cursor back one column; compensates glyphs advancing too far."""


class Symbol(Enum):
    """Glyphs usable as level indicators."""

    POO = "\U0001f4a9"
    COG = "\u2699\ufe0f"
    NOTEBOOK = "\U0001f4d4"
    SPEAKER = "\U0001f5e3"
    WARNING = "\u26a0\ufe0f"
    EXCLAMATION_POINT = "\u2757\ufe0f"
    DOUBLE_EXCLAMATION_POINT = "\u203c\ufe0f"
    EYEBROW = "\U0001f928"
    RED_CROSS = "\u274c"
    POLICE_LIGHT = "\U0001f6a8"
    LADYBUG = "\U0001f41e"
    ORANGE_DIAMOND = "\U0001f536"

    RED_HEART = "\u2764\ufe0f"
    ORANGE_HEART = "\U0001f9e1"
    YELLOW_HEART = "\U0001f49b"
    GREEN_HEART = "\U0001f49a"
    BLUE_HEART = "\U0001f499"
    PURPLE_HEART = "\U0001f49c"
    BLACK_HEART = "\U0001f5a4"
    GREY_HEART = "\U0001fa76"
    BROWN_HEART = "\U0001f90e"
    WHITE_HEART = "\U0001f90d"
    PINK_HEART = "\U0001fa77"
    LIGHT_BLUE_HEART = "\U0001fa75"

    @property
    def glyph(self) -> str:
        return self.value


_Env = OutputEnvironment

_VSCODE = (_Env.MACOS_VSCODE, _Env.WINDOWS_VSCODE, _Env.UNKNOWN_VSCODE)
_WINDOWS_SHELLS = (_Env.WINDOWS_TERMINAL, _Env.WINDOWS_CONSOLE)


def _row(padding: str = NO_PADDING, where: Iterable[OutputEnvironment] = ()) -> dict[OutputEnvironment, str]:
    """Return a full environment row: ``padding`` for ``where``, empty elsewhere.

    Xcode renders every glyph correctly and is never part of ``where``.
    """
    targets = frozenset(where)
    if _Env.XCODE in targets:
        raise ValueError("Xcode never needs padding")
    return {environment: (padding if environment in targets else NO_PADDING) for environment in _Env}


_RAW_TABLE: dict[Symbol, dict[OutputEnvironment, str]] = {
    Symbol.POO: _row(),
    Symbol.NOTEBOOK: _row(),
    Symbol.EYEBROW: _row(),
    Symbol.RED_CROSS: _row(),
    Symbol.POLICE_LIGHT: _row(),
    Symbol.LADYBUG: _row(),
    Symbol.ORANGE_DIAMOND: _row(),
    Symbol.ORANGE_HEART: _row(),
    Symbol.YELLOW_HEART: _row(),
    Symbol.GREEN_HEART: _row(),
    Symbol.BLUE_HEART: _row(),
    Symbol.PURPLE_HEART: _row(),
    Symbol.BLACK_HEART: _row(),
    Symbol.BROWN_HEART: _row(),
    Symbol.WHITE_HEART: _row(),
    Symbol.COG: _row(ONE_SPACE, (*_VSCODE, _Env.MACOS_TERMINAL)),
    Symbol.WARNING: _row(ONE_SPACE, (*_VSCODE, _Env.MACOS_TERMINAL)),
    Symbol.DOUBLE_EXCLAMATION_POINT: _row(ONE_SPACE, (*_VSCODE, _Env.MACOS_TERMINAL)),
    Symbol.RED_HEART: _row(ONE_SPACE, (*_VSCODE, _Env.MACOS_TERMINAL)),
    Symbol.SPEAKER: _row(ONE_SPACE, (*_VSCODE, *_WINDOWS_SHELLS, _Env.MACOS_TERMINAL, _Env.MACOS_ITERM2)),
    Symbol.EXCLAMATION_POINT: _row(CURSOR_LEFT, _WINDOWS_SHELLS),
    Symbol.GREY_HEART: _row(ONE_SPACE, _VSCODE),
    Symbol.PINK_HEART: _row(ONE_SPACE, _VSCODE),
    Symbol.LIGHT_BLUE_HEART: _row(ONE_SPACE, _VSCODE),
}


def _freeze(raw: Mapping[Symbol, Mapping[OutputEnvironment, str]]) -> Mapping[Symbol, Mapping[OutputEnvironment, str]]:
    missing = [(symbol, environment) for symbol in Symbol for environment in OutputEnvironment if environment not in raw.get(symbol, {})]
    if missing:
        raise RuntimeError(f"padding table incomplete: {missing!r}")
    return MappingProxyType({symbol: MappingProxyType(dict(raw[symbol])) for symbol in Symbol})


PADDING_TABLE: Mapping[Symbol, Mapping[OutputEnvironment, str]] = _freeze(_RAW_TABLE)
"""Read-only ``symbol -> environment -> padding`` table covering every pair."""


def render_symbol(symbol: Symbol, environment: OutputEnvironment) -> tuple[str, str]:
    """Return ``(glyph, padding)`` for ``symbol`` displayed in ``environment``.

    Examples
    --------
    >>> render_symbol(Symbol.WARNING, OutputEnvironment.MACOS_TERMINAL)[1]
    ' '
    >>> render_symbol(Symbol.WARNING, OutputEnvironment.XCODE)[1]
    ''
    >>> render_symbol(Symbol.EXCLAMATION_POINT, OutputEnvironment.WINDOWS_CONSOLE)[1]
    '\\x1b[1D'
    """
    return symbol.glyph, PADDING_TABLE[symbol][environment]


def padded(symbol: Symbol, environment: OutputEnvironment) -> str:
    """Return the glyph followed by its corrective padding."""
    glyph, padding = render_symbol(symbol, environment)
    return glyph + padding


__all__ = [
    "CURSOR_LEFT",
    "NO_PADDING",
    "ONE_SPACE",
    "PADDING_TABLE",
    "Symbol",
    "padded",
    "render_symbol",
]
