"""Runtime façade exposing a process-wide console sink.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``bind``, ``shutdown``) that
host applications use instead of constructing :class:`CltSink` by hand. The
module merges :class:`RuntimeConfig` with ``LOG_*`` environment overrides and
installs the resulting sink as the active singleton.

Contents
--------
* ``init`` – composition root.
* ``get`` / ``bind`` – logger proxies and temporary base metadata.
* ``inspect_runtime`` – read-only snapshot of the active configuration.
* ``shutdown`` – detaches the stdlib bridge and clears the singleton.

System Role
-----------
Outer shell. Code that needs several independent sinks (for example two
programs sharing one terminal through a shared lock) constructs
:class:`CltSink` directly instead.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from lib_log_clt.adapters.console.clt_sink import CltSink
from lib_log_clt.domain import LogLevel, OutputEnvironment, Style

from ._composition import LoggerProxy, build_runtime, teardown_runtime
from ._settings import RuntimeConfig, build_runtime_settings
from ._state import LoggingRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logging runtime."""

    style: Style
    environment: OutputEnvironment
    console_level: LogLevel
    terminator: str
    metadata: Mapping[str, Any]
    targets: tuple[str, ...]
    stdlib_bridge: bool


def init(config: RuntimeConfig | None = None, **overrides: Any) -> CltSink:
    """Compose the console sink and install it as the active runtime.

    Parameters
    ----------
    config:
        Base configuration; defaults to :class:`RuntimeConfig` defaults.
    overrides:
        Field overrides applied on top of ``config`` (e.g. ``style="text"``).

    Returns
    -------
    CltSink
        The installed sink, for callers that want to hold on to it.

    Raises
    ------
    ValueError
        When a style, level or ``LOG_*`` variable cannot be parsed.

    Examples
    --------
    >>> import io
    >>> out = io.BytesIO()
    >>> _ = init(style="text", routing={LogLevel.TRACE: out})
    >>> get("docs").notice("ready")
    >>> out.getvalue()
    b'NOTICE: ready\\n'
    >>> shutdown()
    """
    base = config if config is not None else RuntimeConfig()
    if overrides:
        base = replace(base, **overrides)
    settings = build_runtime_settings(base)
    runtime = build_runtime(settings)
    previous = clear_runtime()
    if previous is not None:
        teardown_runtime(previous)
    set_runtime(runtime)
    return runtime.sink


def get(name: str) -> LoggerProxy:
    """Return a :class:`LoggerProxy` bound to the active sink."""

    return LoggerProxy(name, current_runtime().sink)


def sink() -> CltSink:
    """Return the active sink."""

    return current_runtime().sink


@contextmanager
def bind(**metadata: Any) -> Iterator[CltSink]:
    """Add ``metadata`` to the base metadata for the duration of the block.

    On exit only the bound keys are put back to their previous values (or
    removed when they were absent); other base metadata changes made inside
    the block survive. Base metadata is shared by every thread writing through
    the sink.

    Examples
    --------
    >>> import io
    >>> out = io.BytesIO()
    >>> active = init(style="text", routing={LogLevel.TRACE: out})
    >>> with bind(req="1"):
    ...     active["user"] = "a"
    >>> dict(active.metadata)
    {'user': 'a'}
    >>> shutdown()
    """

    active = current_runtime().sink
    current = active.metadata
    previous = {key: current.get(key) for key in metadata}
    active.update_metadata(metadata)
    try:
        yield active
    finally:
        active.update_metadata(previous)


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    active = runtime.sink
    return RuntimeSnapshot(
        style=active.style,
        environment=active.environment,
        console_level=active.log_level,
        terminator=active.terminator,
        metadata=MappingProxyType(dict(active.metadata)),
        targets=tuple(repr(target) for target in active.targets),
        stdlib_bridge=runtime.stdlib_handler is not None,
    )


def shutdown() -> None:
    """Detach the stdlib bridge and clear the active runtime.

    Raises
    ------
    RuntimeError
        When no runtime is initialised.
    """

    runtime = current_runtime()
    teardown_runtime(runtime)
    clear_runtime()


__all__ = [
    "LoggerProxy",
    "LoggingRuntime",
    "RuntimeConfig",
    "RuntimeSnapshot",
    "bind",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "shutdown",
    "sink",
]
