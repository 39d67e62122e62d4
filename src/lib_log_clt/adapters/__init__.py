"""Adapters implementing the application ports."""

from __future__ import annotations

from .console.clt_sink import DEFAULT_ROUTING, CltSink
from .environment import ProcessEnvironmentProbe, StaticEnvironmentProbe, detect, is_terminal
from .output import STDERR, STDOUT, FileDescriptorOutput, StreamOutput, as_output
from .stdlib_handler import CltLoggingHandler

__all__ = [
    "CltLoggingHandler",
    "CltSink",
    "DEFAULT_ROUTING",
    "FileDescriptorOutput",
    "ProcessEnvironmentProbe",
    "STDERR",
    "STDOUT",
    "StaticEnvironmentProbe",
    "StreamOutput",
    "as_output",
    "detect",
    "is_terminal",
]
