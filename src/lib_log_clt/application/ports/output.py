"""Output port describing the raw byte-write primitive.

Purpose
-------
Define the narrow contract the sink needs from an output handle: write every
byte or fail, and report whether the handle is an interactive terminal.

Contents
--------
* :class:`OutputPort` – runtime-checkable protocol implemented by the adapters
  in :mod:`lib_log_clt.adapters.output`.

System Role
-----------
Keeps the sink independent from file descriptors, buffered streams, and test
doubles alike.
"""

from __future__ import annotations

from typing import Hashable, Protocol, runtime_checkable


@runtime_checkable
class OutputPort(Protocol):
    """Write-all-or-fail byte sink."""

    @property
    def key(self) -> Hashable:
        """Identity of the underlying handle (e.g. the file descriptor number).

        Ports sharing a key are one target as far as the sink is concerned.
        """

    def write_all(self, data: bytes) -> None:
        """Write every byte of ``data`` or raise :class:`OSError`."""

    def isatty(self) -> bool:
        """Return ``True`` when the handle is connected to a terminal."""


__all__ = ["OutputPort"]
