"""Public package surface for the concurrent-safe console logger.

Two ways in:

* ``CltSink`` for programs that want an explicit sink object (several sinks,
  shared locks, custom routing).
* ``init`` / ``get`` / ``bind`` / ``shutdown`` for a process-wide sink, with
  ``LOG_*`` environment overrides and an optional stdlib bridge.
"""

from __future__ import annotations

from . import __init__conf__
from .adapters import CltLoggingHandler, CltSink, DEFAULT_ROUTING, STDERR, STDOUT, StaticEnvironmentProbe
from .domain import LogLevel, LogRecord, OutputEnvironment, Style, Symbol, render_symbol
from .runtime import (
    LoggerProxy,
    RuntimeConfig,
    RuntimeSnapshot,
    bind,
    get,
    init,
    inspect_runtime,
    is_initialised,
    shutdown,
    sink,
)

__version__ = __init__conf__.version


def summary_info() -> str:
    """Return the metadata banner used by the CLI ``info`` command.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = [
    "CltLoggingHandler",
    "CltSink",
    "DEFAULT_ROUTING",
    "LogLevel",
    "LogRecord",
    "LoggerProxy",
    "OutputEnvironment",
    "RuntimeConfig",
    "RuntimeSnapshot",
    "STDERR",
    "STDOUT",
    "StaticEnvironmentProbe",
    "Style",
    "Symbol",
    "bind",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "render_symbol",
    "shutdown",
    "sink",
    "summary_info",
]
