"""Log level abstraction providing the ordered severities of the sink.

Purpose
-------
Offer a domain-specific representation of log severities that extends the
stdlib levels with ``TRACE`` and ``NOTICE`` so the full seven-step ordering
used for routing and threshold filtering is available.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and ordering.
* ``_CODE_TABLE`` constant mapping levels to four-letter codes.

System Role
-----------
Used by the routing map, the prefix resolver, and the stdlib bridge so every
layer agrees on what "below warning" means.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum


@functools.total_ordering
class LogLevel(Enum):
    """Enumerated logging levels ordered from ``TRACE`` to ``CRITICAL``."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    NOTICE = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    @property
    def severity(self) -> str:
        """Return the lowercase severity name."""

        return self.name.lower()

    @property
    def code(self) -> str:
        """Return the four-letter code used in compact listings."""

        return _CODE_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` integer matching this level.

        ``TRACE`` and ``NOTICE`` have no stdlib constant; their numeric value
        sits between the neighbouring stdlib levels.
        """

        return getattr(logging, self.name, self.value)

    @classmethod
    def ordered(cls) -> tuple["LogLevel", ...]:
        """Return every level from least to most severe."""

        return tuple(sorted(cls, key=lambda level: level.value))

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        if normalized == "WARN":
            normalized = "WARNING"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate any stdlib logging integer into the nearest lower level.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.WARNING)
        <LogLevel.WARNING: 30>
        >>> LogLevel.from_python_level(15)
        <LogLevel.DEBUG: 10>
        >>> LogLevel.from_python_level(0)
        <LogLevel.TRACE: 5>
        """
        selected = cls.TRACE
        for candidate in cls.ordered():
            if candidate.value <= level:
                selected = candidate
        return selected

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` whose value is exactly ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


_CODE_TABLE = {
    LogLevel.TRACE: "TRAC",
    LogLevel.DEBUG: "DEBG",
    LogLevel.INFO: "INFO",
    LogLevel.NOTICE: "NOTE",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERRO",
    LogLevel.CRITICAL: "CRIT",
}


def coerce_level(level: str | LogLevel) -> LogLevel:
    """Normalise level inputs (string or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARNING
    True
    >>> coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    return LogLevel.from_name(level)


__all__ = ["LogLevel", "coerce_level"]
