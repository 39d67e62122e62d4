"""Port for the process-context primitives used by environment detection."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentProbePort(Protocol):
    """Read-only view over environment variables and the host platform."""

    @property
    def platform(self) -> str:
        """Return the :data:`sys.platform` style identifier (``darwin``, ``win32``...)."""

    def getenv(self, name: str) -> str | None:
        """Return the value of environment variable ``name`` or ``None``."""


__all__ = ["EnvironmentProbePort"]
