"""Log record value object handed to the sink by logging front-ends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .levels import LogLevel
from .metadata import MetadataValue


@dataclass(slots=True, frozen=True)
class LogRecord:
    """One log call as seen by the sink.

    Attributes
    ----------
    level:
        Severity used for routing, threshold filtering and prefix lookup.
    message:
        Rendered message text.
    metadata:
        Call-site metadata merged over the sink's base metadata. ``None`` means
        the caller supplied none, which lets the sink reuse its cached
        rendering.
    source, file, function, line:
        Provenance of the call. Accepted for front-end compatibility; the
        console line does not include them.
    """

    level: LogLevel
    message: str
    metadata: Mapping[str, MetadataValue] | None = None
    source: str = ""
    file: str = ""
    function: str = ""
    line: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.level, LogLevel):
            raise TypeError(f"level must be a LogLevel, got {type(self.level).__name__}")
        if self.metadata is not None:
            object.__setattr__(self, "metadata", dict(self.metadata))


__all__ = ["LogRecord"]
