"""Shared fixtures for the test suite."""

from __future__ import annotations

import io
from typing import Callable, Iterator

import pytest

from lib_log_clt import runtime
from lib_log_clt.adapters.console.clt_sink import CltSink
from lib_log_clt.adapters.environment import StaticEnvironmentProbe
from lib_log_clt.domain.levels import LogLevel

_LOG_VARIABLES = (
    "LOG_CONSOLE_STYLE",
    "LOG_CONSOLE_LEVEL",
    "LOG_FORCE_COLOR",
    "LOG_NO_COLOR",
    "NO_COLOR",
    "LOG_TERMINATOR",
    "LIB_LOG_CLT_USE_DOTENV",
)


@pytest.fixture(autouse=True)
def _clean_log_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell settings from leaking into assertions."""

    for name in _LOG_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reset_runtime() -> Iterator[None]:
    """Tear down whatever runtime a test installed."""

    try:
        yield
    finally:
        if runtime.is_initialised():
            runtime.shutdown()


@pytest.fixture
def linux_probe() -> StaticEnvironmentProbe:
    return StaticEnvironmentProbe({}, platform="linux")


@pytest.fixture
def make_sink(linux_probe: StaticEnvironmentProbe) -> Callable[..., tuple[CltSink, io.BytesIO]]:
    """Return a factory building a sink that routes every level into one buffer."""

    def factory(**kwargs: object) -> tuple[CltSink, io.BytesIO]:
        buffer = io.BytesIO()
        kwargs.setdefault("routing", {LogLevel.TRACE: buffer})
        kwargs.setdefault("probe", linux_probe)
        kwargs.setdefault("style", "text")
        return CltSink(**kwargs), buffer  # type: ignore[arg-type]

    return factory
