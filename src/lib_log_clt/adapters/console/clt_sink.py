"""Concurrent-safe console sink for command-line tools.

Purpose
-------
Render one :class:`LogRecord` as a single line and write it to the output
target routed for its level, without ever interleaving two records and
without ever raising at the call site.

Contents
--------
* :data:`DEFAULT_ROUTING` – below ``WARNING`` to stdout, the rest to stderr.
* :class:`CltSink` – the sink implementing :class:`ConsoleSinkPort`.

System Role
-----------
Primary human-facing sink. Everything that shapes a line (environment, prefix
table, routing map) is resolved in ``__init__``; only the base metadata may
change afterwards, and each change swaps the metadata together with its cached
rendering.

Alignment Notes
---------------
Output is always UTF-8. A record that cannot be written in full is lost; the
optional diagnostic hook is told about it, the caller is not.
"""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager
from typing import Any, Callable, Hashable, Mapping, Optional

from lib_log_clt.adapters.environment import detect, is_terminal
from lib_log_clt.adapters.output import STDERR, STDOUT, as_output
from lib_log_clt.application.ports.console import ConsoleSinkPort
from lib_log_clt.application.ports.environment import EnvironmentProbePort
from lib_log_clt.application.ports.output import OutputPort
from lib_log_clt.domain.environment import OutputEnvironment
from lib_log_clt.domain.levels import LogLevel, coerce_level
from lib_log_clt.domain.metadata import MetadataCache, MetadataValue, coerce_metadata
from lib_log_clt.domain.records import LogRecord
from lib_log_clt.domain.routing import build_routing_map
from lib_log_clt.domain.styles import PrefixTable, Style, coerce_style, resolve_prefixes

LOGGER = logging.getLogger(__name__)

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]

DEFAULT_ROUTING: Mapping[LogLevel, int] = {
    LogLevel.TRACE: STDOUT,
    LogLevel.WARNING: STDERR,
}
#: Default sparse routing: ``TRACE``..``NOTICE`` to stdout, ``WARNING``.. to stderr.

_WRITE_ERRORS = (OSError, ValueError)


class CltSink(ConsoleSinkPort):
    """Write one line per record to level-routed outputs.

    Parameters
    ----------
    style:
        ``none``, ``text``, ``emoji``, ``color`` or ``auto`` (default).
    routing:
        Sparse ``level -> target`` overrides; each applies from its level up to
        the next override. Targets are file descriptors, file objects or
        :class:`OutputPort` instances; ``None`` stops routing (records at those
        levels are dropped). Defaults to :data:`DEFAULT_ROUTING`.
    terminator:
        Text appended after every line (default ``"\\n"``).
    metadata:
        Initial base metadata.
    log_level:
        Records below this level are dropped (default ``INFO``).
    lock:
        Lock serialising writes. Each sink owns a fresh lock unless one is
        shared explicitly between sinks writing to the same handle.
    probe, environment:
        Environment detection inputs; ``environment`` skips detection.
    force_color, no_color:
        Colour overrides applied while resolving ``auto``/``color``.
    diagnostic:
        Callback receiving ``("write_failed", payload)`` or
        ``("render_failed", payload)`` when a record is lost.

    Examples
    --------
    >>> import io
    >>> out = io.BytesIO()
    >>> sink = CltSink(style="text", routing={LogLevel.TRACE: out}, metadata={"unit": "Z"})
    >>> sink.warning("disk low")
    >>> out.getvalue().decode("utf-8")
    '*** WARNING: [unit: "Z"] disk low\\n'
    """

    def __init__(
        self,
        *,
        style: str | Style = Style.AUTO,
        routing: Mapping[LogLevel, OutputPort | int | Any | None] | None = None,
        terminator: str = "\n",
        metadata: Mapping[str, MetadataValue] | None = None,
        log_level: str | LogLevel = LogLevel.INFO,
        lock: AbstractContextManager[Any] | None = None,
        probe: EnvironmentProbePort | None = None,
        environment: OutputEnvironment | None = None,
        force_color: bool = False,
        no_color: bool = False,
        diagnostic: DiagnosticHook = None,
    ) -> None:
        requested = coerce_style(style)
        overrides = DEFAULT_ROUTING if routing is None else routing
        ports: dict[LogLevel, OutputPort | None] = {
            coerce_level(level): (None if target is None else as_output(target)) for level, target in overrides.items()
        }
        self._routing: Mapping[LogLevel, OutputPort] = build_routing_map(ports)
        self._log_level = coerce_level(log_level)
        self._terminator = terminator
        self._lock = lock if lock is not None else threading.Lock()
        self._metadata = MetadataCache(coerce_metadata(metadata))
        self._diagnostic = diagnostic
        self._reporting = threading.local()

        targets = self.targets
        primary = targets[0] if targets else None
        self._environment = environment if environment is not None else detect(primary, probe)
        # Colour only when every routed target is a terminal.
        self._is_terminal = bool(targets) and all(is_terminal(target) for target in targets)
        self._prefixes: PrefixTable = resolve_prefixes(
            requested,
            self._environment,
            is_terminal=self._is_terminal,
            force_color=force_color,
            no_color=no_color,
        )
        LOGGER.debug(
            "console sink ready: environment=%s style=%s->%s terminal=%s",
            self._environment.value,
            requested.value,
            self._prefixes.style.value,
            self._is_terminal,
        )

    # -- read-only configuration -------------------------------------------------

    @property
    def environment(self) -> OutputEnvironment:
        return self._environment

    @property
    def style(self) -> Style:
        """Concrete style in use (``auto`` already resolved)."""
        return self._prefixes.style

    @property
    def prefixes(self) -> PrefixTable:
        return self._prefixes

    @property
    def routing(self) -> Mapping[LogLevel, OutputPort]:
        return self._routing

    @property
    def targets(self) -> tuple[OutputPort, ...]:
        """Distinct output targets (by handle ``key``), in level order."""
        seen: dict[Hashable, OutputPort] = {}
        for level in LogLevel.ordered():
            port = self._routing.get(level)
            if port is not None:
                seen.setdefault(port.key, port)
        return tuple(seen.values())

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    @property
    def terminator(self) -> str:
        return self._terminator

    # -- base metadata -------------------------------------------------------------

    @property
    def metadata(self) -> Mapping[str, MetadataValue]:
        """Read-only view of the base metadata."""
        return self._metadata.metadata

    @metadata.setter
    def metadata(self, value: Mapping[str, MetadataValue] | None) -> None:
        self._metadata.replace(coerce_metadata(value))

    def __getitem__(self, key: str) -> MetadataValue:
        return self._metadata.metadata[key]

    def __setitem__(self, key: str, value: MetadataValue | None) -> None:
        self._metadata.set(key, value)

    def __delitem__(self, key: str) -> None:
        if key not in self._metadata.metadata:
            raise KeyError(key)
        self._metadata.set(key, None)

    def update_metadata(self, values: Mapping[str, MetadataValue] | None = None, **pairs: MetadataValue) -> None:
        """Merge ``values`` and ``pairs`` into the base metadata; ``None`` values remove keys."""
        merged = coerce_metadata(values)
        merged.update(pairs)
        self._metadata.update(merged)

    # -- rendering and writing ------------------------------------------------------

    def accepts(self, level: LogLevel) -> bool:
        """Return ``True`` when a record at ``level`` would be written."""
        return level >= self._log_level and level in self._routing

    def format(self, record: LogRecord) -> str:
        """Return the full line for ``record``, terminator included."""
        return "".join(
            (
                self._prefixes.prefix_for(record.level),
                self._metadata.render(record.metadata),
                record.message,
                self._prefixes.suffix,
                self._terminator,
            )
        )

    def write(self, record: LogRecord) -> None:
        """Write ``record`` to its routed target; failures drop the record."""
        if record.level < self._log_level:
            return
        target = self._routing.get(record.level)
        if target is None:
            return
        try:
            data = self.format(record).encode("utf-8", errors="replace")
        except Exception as exc:  # noqa: BLE001
            self._report("render_failed", {"level": record.level.severity, "target": repr(target), "error": repr(exc)})
            return
        failure: BaseException | None = None
        with self._lock:
            try:
                target.write_all(data)
            except _WRITE_ERRORS as exc:
                failure = exc
        if failure is not None:
            self._report(
                "write_failed",
                {"level": record.level.severity, "target": repr(target), "bytes": len(data), "error": repr(failure)},
            )

    def log(
        self,
        level: LogLevel,
        message: str,
        metadata: Mapping[str, MetadataValue] | None = None,
        *,
        source: str = "",
        file: str = "",
        function: str = "",
        line: int = 0,
    ) -> None:
        self.write(
            LogRecord(
                level=level,
                message=message,
                metadata=metadata,
                source=source,
                file=file,
                function=function,
                line=line,
            )
        )

    def trace(self, message: str, metadata: Mapping[str, MetadataValue] | None = None) -> None:
        self.log(LogLevel.TRACE, message, metadata)

    def debug(self, message: str, metadata: Mapping[str, MetadataValue] | None = None) -> None:
        self.log(LogLevel.DEBUG, message, metadata)

    def info(self, message: str, metadata: Mapping[str, MetadataValue] | None = None) -> None:
        self.log(LogLevel.INFO, message, metadata)

    def notice(self, message: str, metadata: Mapping[str, MetadataValue] | None = None) -> None:
        self.log(LogLevel.NOTICE, message, metadata)

    def warning(self, message: str, metadata: Mapping[str, MetadataValue] | None = None) -> None:
        self.log(LogLevel.WARNING, message, metadata)

    def error(self, message: str, metadata: Mapping[str, MetadataValue] | None = None) -> None:
        self.log(LogLevel.ERROR, message, metadata)

    def critical(self, message: str, metadata: Mapping[str, MetadataValue] | None = None) -> None:
        self.log(LogLevel.CRITICAL, message, metadata)

    def _report(self, event: str, payload: dict[str, Any]) -> None:
        """Invoke the diagnostic hook while guarding against callback failures.

        A hook that logs through a handler backed by this sink would re-enter
        here when the write fails again; the thread-local flag stops that loop.
        """
        if self._diagnostic is None or getattr(self._reporting, "active", False):
            return
        self._reporting.active = True
        try:
            self._diagnostic(event, payload)
        except Exception as diagnostic_exc:  # noqa: BLE001
            LOGGER.error("Console sink diagnostic hook raised while reporting %s", event, exc_info=diagnostic_exc)
        finally:
            self._reporting.active = False

    def __contains__(self, key: object) -> bool:
        return key in self._metadata.metadata

    def __repr__(self) -> str:
        return f"CltSink(style={self.style.value!r}, environment={self._environment.value!r}, log_level={self._log_level.name})"


__all__ = ["CltSink", "DEFAULT_ROUTING", "DiagnosticHook"]
