"""Domain entities and value objects used by the console sink."""

from __future__ import annotations

from .environment import OutputEnvironment
from .levels import LogLevel, coerce_level
from .metadata import MetadataCache, MetadataValue, merge_metadata, render_metadata
from .records import LogRecord
from .routing import build_routing_map
from .styles import PrefixTable, Style, coerce_style, resolve_prefixes, resolve_style
from .symbols import PADDING_TABLE, Symbol, render_symbol

__all__ = [
    "LogLevel",
    "LogRecord",
    "MetadataCache",
    "MetadataValue",
    "OutputEnvironment",
    "PADDING_TABLE",
    "PrefixTable",
    "Style",
    "Symbol",
    "build_routing_map",
    "coerce_level",
    "coerce_style",
    "merge_metadata",
    "render_metadata",
    "render_symbol",
    "resolve_prefixes",
    "resolve_style",
]
