"""Bridge from the stdlib :mod:`logging` module into a console sink.

Purpose
-------
Let applications keep calling ``logging.getLogger(...).info(...)`` while the
lines are rendered and routed by :class:`CltSink`.

Contents
--------
* :data:`METADATA_ATTRIBUTE` – ``extra`` key carrying call-site metadata.
* :class:`CltLoggingHandler` – :class:`logging.Handler` forwarding to a sink.

System Role
-----------
Front-end adapter: converts a :class:`logging.LogRecord` into the sink's
``(level, message, metadata, source, file, function, line)`` call. Threshold
filtering stays in the sink.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from lib_log_clt.application.ports.console import ConsoleSinkPort
from lib_log_clt.domain.levels import LogLevel

METADATA_ATTRIBUTE = "metadata"


class CltLoggingHandler(logging.Handler):
    """Forward stdlib log records to a :class:`ConsoleSinkPort`.

    Call-site metadata travels in ``extra={"metadata": {...}}``. Exception
    information is appended to the message on the following lines, as the
    stdlib formatter would.

    Examples
    --------
    >>> import io
    >>> from lib_log_clt.adapters.console.clt_sink import CltSink
    >>> out = io.BytesIO()
    >>> sink = CltSink(style="none", routing={LogLevel.TRACE: out})
    >>> logger = logging.getLogger("doctest.bridge")
    >>> logger.propagate = False
    >>> logger.addHandler(CltLoggingHandler(sink))
    >>> logger.warning("hello %s", "world", extra={"metadata": {"k": "v"}})
    >>> out.getvalue()
    b'[k: "v"] hello world\\n'
    """

    def __init__(self, sink: ConsoleSinkPort, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._sink = sink

    @property
    def sink(self) -> ConsoleSinkPort:
        return self._sink

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            if record.exc_info:
                formatter = self.formatter or logging.Formatter()
                message = f"{message}\n{formatter.formatException(record.exc_info)}"
            elif record.exc_text:
                message = f"{message}\n{record.exc_text}"
            self._sink.log(
                LogLevel.from_python_level(record.levelno),
                message,
                _metadata_of(record),
                source=record.name,
                file=record.pathname,
                function=record.funcName or "",
                line=record.lineno,
            )
        except Exception:  # noqa: BLE001
            self.handleError(record)


def _metadata_of(record: logging.LogRecord) -> Mapping[str, Any] | None:
    metadata = getattr(record, METADATA_ATTRIBUTE, None)
    if isinstance(metadata, Mapping):
        return metadata
    return None


__all__ = ["CltLoggingHandler", "METADATA_ATTRIBUTE"]
