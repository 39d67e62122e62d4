from __future__ import annotations

import io

import pytest

from lib_log_clt.adapters import CltSink, FileDescriptorOutput, ProcessEnvironmentProbe, StaticEnvironmentProbe, StreamOutput
from lib_log_clt.application.ports import ConsoleSinkPort, EnvironmentProbePort, OutputPort
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


class _MinimalOutput:
    key = "minimal"

    def __init__(self) -> None:
        self.data = b""

    def write_all(self, data: bytes) -> None:
        self.data += data

    def isatty(self) -> bool:
        return False


@pytest.mark.parametrize(
    "candidate, port",
    [
        (FileDescriptorOutput(1), OutputPort),
        (StreamOutput(io.BytesIO()), OutputPort),
        (_MinimalOutput(), OutputPort),
        (ProcessEnvironmentProbe(), EnvironmentProbePort),
        (StaticEnvironmentProbe(), EnvironmentProbePort),
    ],
)
def test_adapters_satisfy_their_ports(candidate: object, port: type) -> None:
    assert isinstance(candidate, port)


def test_sink_satisfies_console_port() -> None:
    sink = CltSink(routing={}, probe=StaticEnvironmentProbe())

    assert isinstance(sink, ConsoleSinkPort)
    assert sink.targets == ()


def test_plain_objects_without_the_contract_are_rejected() -> None:
    assert not isinstance(io.BytesIO(), OutputPort)
    assert not isinstance(object(), EnvironmentProbePort)
