"""Detect the host environment an output handle renders into.

Purpose
-------
Classify the process context (host IDE, terminal emulator, platform) into one
:class:`OutputEnvironment` member so rendering decisions never consult raw
environment variables.

Contents
--------
* :class:`ProcessEnvironmentProbe` – reads :data:`os.environ` and :data:`sys.platform`.
* :class:`StaticEnvironmentProbe` – fixed mapping, used by tests and the CLI.
* :func:`detect` – the classifier.

System Role
-----------
Runs once per sink construction. Detection never raises: anything that is not
recognised falls back to the platform-qualified ``unknown`` member.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping

from lib_log_clt.application.ports.environment import EnvironmentProbePort
from lib_log_clt.application.ports.output import OutputPort
from lib_log_clt.domain.environment import OutputEnvironment

LOGGER = logging.getLogger(__name__)

_XCODE_SERVICE_MARKER = "com.apple.dt.xcode"


class ProcessEnvironmentProbe(EnvironmentProbePort):
    """Probe backed by the live process environment."""

    @property
    def platform(self) -> str:
        return sys.platform

    def getenv(self, name: str) -> str | None:
        return os.environ.get(name)


class StaticEnvironmentProbe(EnvironmentProbePort):
    """Probe answering from a fixed mapping.

    Examples
    --------
    >>> probe = StaticEnvironmentProbe({"TERM_PROGRAM": "iTerm.app"}, platform="darwin")
    >>> probe.getenv("TERM_PROGRAM"), probe.platform
    ('iTerm.app', 'darwin')
    """

    def __init__(self, variables: Mapping[str, str] | None = None, *, platform: str = "linux") -> None:
        self._variables = dict(variables or {})
        self._platform = platform

    @property
    def platform(self) -> str:
        return self._platform

    def getenv(self, name: str) -> str | None:
        return self._variables.get(name)


def is_terminal(output: OutputPort | None) -> bool:
    """Return ``True`` when ``output`` is a live terminal; probe errors count as ``False``."""
    if output is None:
        return False
    try:
        return bool(output.isatty())
    except (OSError, ValueError):
        return False


def _is_xcode(probe: EnvironmentProbePort) -> bool:
    service = probe.getenv("XPC_SERVICE_NAME") or ""
    if _XCODE_SERVICE_MARKER in service.lower():
        return True
    return probe.getenv("__XCODE_BUILT_PRODUCTS_DIR_PATHS") is not None


def detect(output: OutputPort | None, probe: EnvironmentProbePort | None = None) -> OutputEnvironment:
    """Classify the environment ``output`` renders into.

    Parameters
    ----------
    output:
        Handle the sink writes to; only its terminal status is consulted (the
        Windows console host is recognised through it).
    probe:
        Source of environment variables and platform; defaults to the live
        process.

    Examples
    --------
    >>> detect(None, StaticEnvironmentProbe({"TERM_PROGRAM": "Apple_Terminal"}, platform="darwin"))
    <OutputEnvironment.MACOS_TERMINAL: 'macos-terminal'>
    >>> detect(None, StaticEnvironmentProbe({"TERM_PROGRAM": "vscode"}, platform="linux"))
    <OutputEnvironment.UNKNOWN_VSCODE: 'unknown-vscode'>
    >>> detect(None, StaticEnvironmentProbe({"WT_SESSION": "1"}, platform="win32"))
    <OutputEnvironment.WINDOWS_TERMINAL: 'windows-terminal'>
    >>> detect(None, StaticEnvironmentProbe({}, platform="linux"))
    <OutputEnvironment.UNKNOWN: 'unknown'>
    """
    probe = probe if probe is not None else ProcessEnvironmentProbe()
    term_program = (probe.getenv("TERM_PROGRAM") or "").strip()
    platform = probe.platform

    if _is_xcode(probe):
        environment = OutputEnvironment.XCODE
    elif platform == "darwin":
        environment = {
            "Apple_Terminal": OutputEnvironment.MACOS_TERMINAL,
            "iTerm.app": OutputEnvironment.MACOS_ITERM2,
            "vscode": OutputEnvironment.MACOS_VSCODE,
        }.get(term_program, OutputEnvironment.MACOS_UNKNOWN)
    elif platform.startswith("win"):
        if term_program == "vscode":
            environment = OutputEnvironment.WINDOWS_VSCODE
        elif probe.getenv("WT_SESSION"):
            environment = OutputEnvironment.WINDOWS_TERMINAL
        elif is_terminal(output):
            environment = OutputEnvironment.WINDOWS_CONSOLE
        else:
            environment = OutputEnvironment.WINDOWS_UNKNOWN
    elif term_program == "vscode":
        environment = OutputEnvironment.UNKNOWN_VSCODE
    else:
        environment = OutputEnvironment.UNKNOWN

    LOGGER.debug("detected output environment %s (platform=%s, TERM_PROGRAM=%r)", environment.value, platform, term_program)
    return environment


__all__ = ["ProcessEnvironmentProbe", "StaticEnvironmentProbe", "detect", "is_terminal"]
