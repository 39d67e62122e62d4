"""Level → output target routing built from sparse boundary overrides."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, TypeVar

from .levels import LogLevel

T = TypeVar("T")


def build_routing_map(overrides: Mapping[LogLevel, T | None]) -> Mapping[LogLevel, T]:
    """Expand ``overrides`` across the ordered level sequence.

    Each override applies from its level upwards until the next override. A
    ``None`` override stops routing, so those levels get no entry and records
    at them are dropped.

    Examples
    --------
    >>> routes = build_routing_map({LogLevel.TRACE: "out", LogLevel.WARNING: "err"})
    >>> [routes[level] for level in (LogLevel.DEBUG, LogLevel.NOTICE, LogLevel.ERROR)]
    ['out', 'out', 'err']
    >>> routes = build_routing_map({LogLevel.INFO: "out", LogLevel.ERROR: None})
    >>> sorted(level.name for level in routes)
    ['INFO', 'NOTICE', 'WARNING']
    """
    routes: dict[LogLevel, T] = {}
    current: T | None = None
    for level in LogLevel.ordered():
        if level in overrides:
            current = overrides[level]
        if current is not None:
            routes[level] = current
    return MappingProxyType(routes)


__all__ = ["build_routing_map"]
