"""Runtime configuration and its environment-variable overrides.

Purpose
-------
Collect everything :func:`lib_log_clt.runtime.init` needs in one frozen
:class:`RuntimeConfig`, then layer ``LOG_*`` environment variables on top.

Contents
--------
* :class:`RuntimeConfig` – caller-facing configuration dataclass.
* :func:`build_runtime_settings` – applies environment overrides.

System Role
-----------
Validation happens here, at init time, so malformed values surface as
:class:`ValueError` naming the offending variable instead of at log time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping

from lib_log_clt.adapters.console.clt_sink import DiagnosticHook
from lib_log_clt.config import env_bool, env_flag, env_text
from lib_log_clt.domain.levels import LogLevel, coerce_level
from lib_log_clt.domain.styles import Style, coerce_style


_TERMINATOR_ALIASES = {
    "newline": "\n",
    "lf": "\n",
    "crlf": "\r\n",
    "none": "",
}


@dataclass(frozen=True)
class RuntimeConfig:
    """Configuration accepted by :func:`lib_log_clt.runtime.init`.

    Attributes
    ----------
    style:
        Console style name or :class:`Style` (``LOG_CONSOLE_STYLE``).
    console_level:
        Threshold below which records are dropped (``LOG_CONSOLE_LEVEL``).
    routing:
        Sparse ``level -> target`` overrides; ``None`` keeps stdout/stderr.
    terminator:
        Line terminator (``LOG_TERMINATOR``: ``newline``, ``crlf``, ``none`` or
        literal text).
    metadata:
        Initial base metadata.
    force_color, no_color:
        Colour overrides (``LOG_FORCE_COLOR``, ``LOG_NO_COLOR``, ``NO_COLOR``).
    capture_stdlib:
        Attach a :class:`CltLoggingHandler` to the root logger.
    diagnostic_hook:
        Callback receiving ``write_failed`` notifications.
    """

    style: str | Style = Style.AUTO
    console_level: str | LogLevel = LogLevel.INFO
    routing: Mapping[LogLevel, Any] | None = None
    terminator: str = "\n"
    metadata: Mapping[str, Any] | None = None
    force_color: bool = False
    no_color: bool = False
    capture_stdlib: bool = False
    diagnostic_hook: DiagnosticHook = None


def _from_env(name: str, parse: Callable[[str], Any], fallback: Any) -> Any:
    raw = env_text(name)
    if raw is None:
        return fallback
    try:
        return parse(raw)
    except ValueError as exc:
        raise ValueError(f"{name}: {exc}") from exc


def _parse_terminator(raw: str) -> str:
    """Translate ``LOG_TERMINATOR`` aliases.

    Examples
    --------
    >>> _parse_terminator("newline")
    '\\n'
    >>> _parse_terminator("none")
    ''
    >>> _parse_terminator(" | ")
    ' | '
    """
    return _TERMINATOR_ALIASES.get(raw.strip().lower(), raw)


def build_runtime_settings(config: RuntimeConfig) -> RuntimeConfig:
    """Return ``config`` with environment overrides applied and values normalised."""

    style = _from_env("LOG_CONSOLE_STYLE", Style.from_name, coerce_style(config.style))
    console_level = _from_env("LOG_CONSOLE_LEVEL", LogLevel.from_name, coerce_level(config.console_level))
    raw_terminator = os.getenv("LOG_TERMINATOR")
    terminator = config.terminator if not raw_terminator else _parse_terminator(raw_terminator)
    force_color = env_bool("LOG_FORCE_COLOR", config.force_color)
    no_color = env_bool("LOG_NO_COLOR", config.no_color) or env_flag("NO_COLOR")
    return replace(
        config,
        style=style,
        console_level=console_level,
        terminator=terminator,
        force_color=force_color,
        no_color=no_color,
    )


__all__ = ["DiagnosticHook", "RuntimeConfig", "build_runtime_settings"]
