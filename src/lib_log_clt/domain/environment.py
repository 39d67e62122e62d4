"""Closed classification of the host terminal/editor environment.

The detector in :mod:`lib_log_clt.adapters.environment` maps process context
onto one of these members; the symbol table and style resolver only ever see
the enum, never raw environment variables.
"""

from __future__ import annotations

from enum import Enum


class OutputEnvironment(Enum):
    """Host environment the sink renders for."""

    XCODE = "xcode-ide"
    MACOS_TERMINAL = "macos-terminal"
    MACOS_ITERM2 = "macos-iterm"
    MACOS_VSCODE = "macos-vscode"
    MACOS_UNKNOWN = "macos-unknown"
    WINDOWS_TERMINAL = "windows-terminal"
    WINDOWS_CONSOLE = "windows-console"
    WINDOWS_VSCODE = "windows-vscode"
    WINDOWS_UNKNOWN = "windows-unknown"
    UNKNOWN_VSCODE = "unknown-vscode"
    UNKNOWN = "unknown"

    @property
    def is_vscode(self) -> bool:
        return self in _VSCODE

    @property
    def is_windows_shell(self) -> bool:
        """Return ``True`` for the Windows console hosts that over-render glyphs."""
        return self in _WINDOWS_SHELLS

    @property
    def supports_color(self) -> bool:
        """Return ``False`` for hosts known to print ANSI escapes verbatim."""
        return self is not OutputEnvironment.XCODE

    @classmethod
    def from_name(cls, name: str) -> "OutputEnvironment":
        """Look up a member by its dashed value or its Python name.

        Examples
        --------
        >>> OutputEnvironment.from_name("macos-iterm")
        <OutputEnvironment.MACOS_ITERM2: 'macos-iterm'>
        >>> OutputEnvironment.from_name("windows_console")
        <OutputEnvironment.WINDOWS_CONSOLE: 'windows-console'>
        """
        normalized = name.strip().lower()
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown output environment: {name!r}")


_VSCODE = frozenset(
    {
        OutputEnvironment.MACOS_VSCODE,
        OutputEnvironment.WINDOWS_VSCODE,
        OutputEnvironment.UNKNOWN_VSCODE,
    }
)

_WINDOWS_SHELLS = frozenset(
    {
        OutputEnvironment.WINDOWS_TERMINAL,
        OutputEnvironment.WINDOWS_CONSOLE,
    }
)


__all__ = ["OutputEnvironment"]
