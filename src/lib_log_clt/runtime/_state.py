"""Runtime state container and access helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock

from lib_log_clt.adapters.console.clt_sink import CltSink


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators assembled by the composition root."""

    sink: CltSink
    stdlib_handler: logging.Handler | None


_STATE: LoggingRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> LoggingRuntime | None:
    """Remove the active runtime if present and return it."""

    with _STATE_LOCK:
        global _STATE
        previous, _STATE = _STATE, None
        return previous


def current_runtime() -> LoggingRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_clt.init() must be called before using the logging API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_log_clt.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "LoggingRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
