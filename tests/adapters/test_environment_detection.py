from __future__ import annotations

import pytest

from lib_log_clt.adapters.environment import ProcessEnvironmentProbe, StaticEnvironmentProbe, detect, is_terminal
from lib_log_clt.application.ports.environment import EnvironmentProbePort
from lib_log_clt.domain.environment import OutputEnvironment
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


class _Tty:
    key = 1

    def __init__(self, answer: bool | Exception) -> None:
        self.answer = answer

    def write_all(self, data: bytes) -> None:  # noqa: ARG002
        return None

    def isatty(self) -> bool:
        if isinstance(self.answer, Exception):
            raise self.answer
        return self.answer


@pytest.mark.parametrize(
    "variables, platform, expected",
    [
        ({"XPC_SERVICE_NAME": "application.com.apple.dt.Xcode.12345"}, "darwin", OutputEnvironment.XCODE),
        ({"__XCODE_BUILT_PRODUCTS_DIR_PATHS": "/tmp/build"}, "darwin", OutputEnvironment.XCODE),
        ({"TERM_PROGRAM": "Apple_Terminal"}, "darwin", OutputEnvironment.MACOS_TERMINAL),
        ({"TERM_PROGRAM": "iTerm.app"}, "darwin", OutputEnvironment.MACOS_ITERM2),
        ({"TERM_PROGRAM": "vscode"}, "darwin", OutputEnvironment.MACOS_VSCODE),
        ({"TERM_PROGRAM": "WezTerm"}, "darwin", OutputEnvironment.MACOS_UNKNOWN),
        ({"TERM_PROGRAM": "vscode", "WT_SESSION": "x"}, "win32", OutputEnvironment.WINDOWS_VSCODE),
        ({"WT_SESSION": "abc"}, "win32", OutputEnvironment.WINDOWS_TERMINAL),
        ({}, "win32", OutputEnvironment.WINDOWS_UNKNOWN),
        ({"TERM_PROGRAM": "vscode"}, "linux", OutputEnvironment.UNKNOWN_VSCODE),
        ({"TERM": "xterm-256color"}, "linux", OutputEnvironment.UNKNOWN),
    ],
)
def test_detect_classifies_process_context(variables: dict[str, str], platform: str, expected: OutputEnvironment) -> None:
    assert detect(None, StaticEnvironmentProbe(variables, platform=platform)) is expected


def test_windows_console_requires_a_terminal() -> None:
    probe = StaticEnvironmentProbe({}, platform="win32")

    assert detect(_Tty(True), probe) is OutputEnvironment.WINDOWS_CONSOLE
    assert detect(_Tty(False), probe) is OutputEnvironment.WINDOWS_UNKNOWN


def test_is_terminal_treats_probe_errors_as_false() -> None:
    assert is_terminal(_Tty(True)) is True
    assert is_terminal(_Tty(OSError("gone"))) is False
    assert is_terminal(_Tty(ValueError("closed"))) is False
    assert is_terminal(None) is False


def test_process_probe_reads_live_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERM_PROGRAM", "vscode")
    probe = ProcessEnvironmentProbe()

    assert isinstance(probe, EnvironmentProbePort)
    assert probe.getenv("TERM_PROGRAM") == "vscode"
    assert probe.platform
