"""Runtime composition helpers wiring the sink and its front-ends.

Purpose
-------
Translate a resolved :class:`RuntimeConfig` into the live
:class:`LoggingRuntime` singleton: one :class:`CltSink`, optionally bridged
into the stdlib root logger.

Contents
--------
* :class:`LoggerProxy` – named facade with level helpers.
* :func:`build_runtime` / :func:`teardown_runtime` – construction and cleanup.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from lib_log_clt.adapters.console.clt_sink import CltSink
from lib_log_clt.adapters.stdlib_handler import CltLoggingHandler
from lib_log_clt.domain.levels import LogLevel

from ._settings import RuntimeConfig
from ._state import LoggingRuntime

__all__ = ["LoggerProxy", "build_runtime", "teardown_runtime"]


class LoggerProxy:
    """Lightweight facade for logging calls carrying a source name.

    The proxy keeps host code decoupled from the sink while providing
    level-specific helpers; ``name`` is forwarded as the record's ``source``.
    """

    def __init__(self, name: str, sink: CltSink) -> None:
        self._name = name
        self._sink = sink

    @property
    def name(self) -> str:
        return self._name

    def trace(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self._log(LogLevel.TRACE, message, metadata)

    def debug(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self._log(LogLevel.DEBUG, message, metadata)

    def info(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self._log(LogLevel.INFO, message, metadata)

    def notice(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self._log(LogLevel.NOTICE, message, metadata)

    def warning(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self._log(LogLevel.WARNING, message, metadata)

    def error(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self._log(LogLevel.ERROR, message, metadata)

    def critical(self, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self._log(LogLevel.CRITICAL, message, metadata)

    def log(self, level: LogLevel, message: str, metadata: Mapping[str, Any] | None = None) -> None:
        self._log(level, message, metadata)

    def _log(self, level: LogLevel, message: str, metadata: Mapping[str, Any] | None) -> None:
        self._sink.log(level, message, metadata, source=self._name)


def build_runtime(settings: RuntimeConfig) -> LoggingRuntime:
    """Assemble the logging runtime from resolved settings."""

    sink = CltSink(
        style=settings.style,
        routing=settings.routing,
        terminator=settings.terminator,
        metadata=settings.metadata,
        log_level=settings.console_level,
        force_color=settings.force_color,
        no_color=settings.no_color,
        diagnostic=settings.diagnostic_hook,
    )
    handler: logging.Handler | None = None
    if settings.capture_stdlib:
        handler = CltLoggingHandler(sink)
        logging.getLogger().addHandler(handler)
    return LoggingRuntime(sink=sink, stdlib_handler=handler)


def teardown_runtime(runtime: LoggingRuntime) -> None:
    """Detach the stdlib bridge installed by :func:`build_runtime`."""

    if runtime.stdlib_handler is not None:
        logging.getLogger().removeHandler(runtime.stdlib_handler)
        runtime.stdlib_handler.close()
