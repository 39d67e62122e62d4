"""Prefix styles and their resolution against an output environment.

Purpose
-------
Turn a requested :class:`Style` plus the detected :class:`OutputEnvironment`
into an immutable :class:`PrefixTable` once, at sink construction time.

Contents
--------
* :class:`Style` – requested presentation (``auto`` included).
* :class:`PrefixTable` – frozen level → prefix mapping plus line suffix.
* :func:`resolve_style` / :func:`resolve_prefixes` – pure resolution helpers.
* ``_TEXT_PREFIXES``, ``_LEVEL_SYMBOLS``, ``_COLOR_CODES`` – per-level tables.

System Role
-----------
Sits between the symbol table and the sink. Both functions are total over
their inputs; the only failure mode is an unknown style *name*, rejected by
:meth:`Style.from_name` before resolution starts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .environment import OutputEnvironment
from .levels import LogLevel
from .symbols import Symbol, padded

RESET = "\x1b[0m"


class Style(Enum):
    """Requested prefix style."""

    NONE = "none"
    TEXT = "text"
    EMOJI = "emoji"
    COLOR = "color"
    AUTO = "auto"

    @classmethod
    def from_name(cls, name: str) -> "Style":
        normalized = name.strip().lower()
        if normalized == "colour":
            normalized = "color"
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown console style: {name!r}") from exc


def coerce_style(style: str | Style) -> Style:
    if isinstance(style, Style):
        return style
    return Style.from_name(style)


_TEXT_PREFIXES: Mapping[LogLevel, str] = {
    LogLevel.TRACE: "TRACE: ",
    LogLevel.DEBUG: "DEBUG: ",
    LogLevel.INFO: "INFO: ",
    LogLevel.NOTICE: "NOTICE: ",
    LogLevel.WARNING: "*** WARNING: ",
    LogLevel.ERROR: "*** ERROR: ",
    LogLevel.CRITICAL: "*** CRITICAL: ",
}

_LEVEL_SYMBOLS: Mapping[LogLevel, Symbol] = {
    LogLevel.TRACE: Symbol.POO,
    LogLevel.DEBUG: Symbol.COG,
    LogLevel.INFO: Symbol.NOTEBOOK,
    LogLevel.NOTICE: Symbol.SPEAKER,
    LogLevel.WARNING: Symbol.WARNING,
    LogLevel.ERROR: Symbol.EXCLAMATION_POINT,
    LogLevel.CRITICAL: Symbol.DOUBLE_EXCLAMATION_POINT,
}

# SGR parameters per level.
_COLOR_CODES: Mapping[LogLevel, str] = {
    LogLevel.TRACE: "2;37",
    LogLevel.DEBUG: "37",
    LogLevel.INFO: "32",
    LogLevel.NOTICE: "34",
    LogLevel.WARNING: "33",
    LogLevel.ERROR: "31",
    LogLevel.CRITICAL: "1;31",
}


@dataclass(frozen=True)
class PrefixTable:
    """Immutable level → prefix mapping resolved for one sink.

    Attributes
    ----------
    style:
        Concrete style the table was built for (never ``AUTO``).
    prefixes:
        Read-only mapping; levels without an entry render no prefix.
    suffix:
        Text appended after every message (the colour reset when ``COLOR``).
    """

    style: Style
    prefixes: Mapping[LogLevel, str] = field(default_factory=dict)
    suffix: str = ""

    def __post_init__(self) -> None:
        if self.style is Style.AUTO:
            raise ValueError("PrefixTable requires a concrete style")
        object.__setattr__(self, "prefixes", MappingProxyType(dict(self.prefixes)))

    def prefix_for(self, level: LogLevel) -> str:
        return self.prefixes.get(level, "")


def level_symbol(level: LogLevel) -> Symbol:
    """Return the glyph used for ``level`` in the emoji style."""
    return _LEVEL_SYMBOLS[level]


def resolve_style(
    requested: Style,
    environment: OutputEnvironment,
    *,
    is_terminal: bool,
    force_color: bool = False,
    no_color: bool = False,
) -> Style:
    """Resolve ``requested`` into a concrete style.

    ``auto`` picks emoji for hosts that print ANSI escapes verbatim, colour for
    a live terminal, and emoji otherwise. ``no_color`` demotes colour (explicit
    colour falls back to text), ``force_color`` promotes ``auto`` to colour on
    hosts that support it.

    Examples
    --------
    >>> resolve_style(Style.AUTO, OutputEnvironment.XCODE, is_terminal=True)
    <Style.EMOJI: 'emoji'>
    >>> resolve_style(Style.AUTO, OutputEnvironment.MACOS_ITERM2, is_terminal=True)
    <Style.COLOR: 'color'>
    >>> resolve_style(Style.AUTO, OutputEnvironment.UNKNOWN, is_terminal=False)
    <Style.EMOJI: 'emoji'>
    """
    if requested is Style.AUTO:
        if no_color or not environment.supports_color:
            return Style.EMOJI
        if is_terminal or force_color:
            return Style.COLOR
        return Style.EMOJI
    if requested is Style.COLOR and no_color:
        return Style.TEXT
    return requested


def resolve_prefixes(
    requested: Style,
    environment: OutputEnvironment,
    *,
    is_terminal: bool,
    force_color: bool = False,
    no_color: bool = False,
) -> PrefixTable:
    """Build the :class:`PrefixTable` for ``requested`` in ``environment``.

    Examples
    --------
    >>> table = resolve_prefixes(Style.TEXT, OutputEnvironment.UNKNOWN, is_terminal=False)
    >>> table.prefix_for(LogLevel.WARNING)
    '*** WARNING: '
    >>> resolve_prefixes(Style.NONE, OutputEnvironment.UNKNOWN, is_terminal=True).prefixes
    mappingproxy({})
    """
    style = resolve_style(
        requested,
        environment,
        is_terminal=is_terminal,
        force_color=force_color,
        no_color=no_color,
    )
    if style is Style.NONE:
        return PrefixTable(style=style)
    if style is Style.TEXT:
        return PrefixTable(style=style, prefixes=_TEXT_PREFIXES)
    if style is Style.EMOJI:
        prefixes = {level: padded(symbol, environment) + " " for level, symbol in _LEVEL_SYMBOLS.items()}
        return PrefixTable(style=style, prefixes=prefixes)
    if style is Style.COLOR:
        prefixes = {level: f"\x1b[{code}m{level.name}: " for level, code in _COLOR_CODES.items()}
        return PrefixTable(style=style, prefixes=prefixes, suffix=RESET)
    raise AssertionError(f"unhandled style {style!r}")  # pragma: no cover - resolve_style is total


__all__ = [
    "PrefixTable",
    "RESET",
    "Style",
    "coerce_style",
    "level_symbol",
    "resolve_prefixes",
    "resolve_style",
]
