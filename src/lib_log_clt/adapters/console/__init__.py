"""Console sinks."""

from __future__ import annotations

from .clt_sink import DEFAULT_ROUTING, CltSink

__all__ = ["CltSink", "DEFAULT_ROUTING"]
