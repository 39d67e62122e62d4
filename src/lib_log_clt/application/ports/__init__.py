"""Protocols separating the sink from process and I/O primitives."""

from __future__ import annotations

from .console import ConsoleSinkPort
from .environment import EnvironmentProbePort
from .output import OutputPort

__all__ = ["ConsoleSinkPort", "EnvironmentProbePort", "OutputPort"]
