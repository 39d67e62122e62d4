"""Console port describing the sink contract seen by logging front-ends.

Purpose
-------
Define the abstraction front-ends (the runtime façade, the stdlib bridge)
depend on, so they stay unaware of prefixes, routing and locking.

Contents
--------
* :class:`ConsoleSinkPort` – runtime-checkable protocol with ``write`` and
  ``log``.

System Role
-----------
Clarifies the boundary between record producers and the concurrent-safe sink
in :mod:`lib_log_clt.adapters.console.clt_sink`.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from lib_log_clt.domain.levels import LogLevel
from lib_log_clt.domain.records import LogRecord


@runtime_checkable
class ConsoleSinkPort(Protocol):
    """Render a log record as one line and write it."""

    def write(self, record: LogRecord) -> None:
        """Write ``record``; never raises for I/O failures."""

    def log(
        self,
        level: LogLevel,
        message: str,
        metadata: Mapping[str, Any] | None = None,
        *,
        source: str = "",
        file: str = "",
        function: str = "",
        line: int = 0,
    ) -> None:
        """Build a :class:`LogRecord` from the arguments and write it."""


__all__ = ["ConsoleSinkPort"]
