"""Write-all output targets implementing :class:`OutputPort`.

Purpose
-------
Provide the byte-write primitive the sink relies on: hand over a complete
buffer, get it written in full or get an :class:`OSError`.

Contents
--------
* :class:`FileDescriptorOutput` – loops over :func:`os.write` on a raw fd.
* :class:`StreamOutput` – wraps binary or text file objects.
* :func:`as_output` – coerces ints, streams, and ports to an :class:`OutputPort`.
* :data:`STDOUT` / :data:`STDERR` – descriptor numbers of the standard streams.

System Role
-----------
Outer adapter. Interrupted system calls are retried by the interpreter
(PEP 475); short writes are continued here. Nothing in this module swallows
errors, that policy lives in the sink.
"""

from __future__ import annotations

import errno
import io
import os
from typing import Any, Hashable

from lib_log_clt.application.ports.output import OutputPort

STDOUT = 1
STDERR = 2


class FileDescriptorOutput(OutputPort):
    """Write to a raw file descriptor without any user-space buffering.

    Examples
    --------
    >>> read_fd, write_fd = os.pipe()
    >>> FileDescriptorOutput(write_fd).write_all(b"hi")
    >>> os.read(read_fd, 2)
    b'hi'
    >>> os.close(read_fd); os.close(write_fd)
    """

    def __init__(self, fd: int) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must be non-negative, got {fd}")
        self._fd = fd

    @property
    def key(self) -> Hashable:
        return self._fd

    @property
    def fd(self) -> int:
        return self._fd

    def write_all(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self._fd, view)
            if written <= 0:
                raise OSError(errno.EIO, f"write to fd {self._fd} made no progress")
            view = view[written:]

    def isatty(self) -> bool:
        try:
            return os.isatty(self._fd)
        except OSError:
            return False

    def __repr__(self) -> str:
        return f"FileDescriptorOutput({self._fd})"


class StreamOutput(OutputPort):
    """Write to a Python file object.

    Binary streams receive the bytes directly. Text streams are flushed and
    their underlying ``buffer`` is used when present; otherwise the bytes are
    decoded back to text.

    Examples
    --------
    >>> import io
    >>> sink = io.BytesIO()
    >>> StreamOutput(sink).write_all("ok".encode("utf-8"))
    >>> sink.getvalue()
    b'ok'
    >>> text = io.StringIO()
    >>> StreamOutput(text).write_all(b"ok")
    >>> text.getvalue()
    'ok'
    """

    def __init__(self, stream: Any) -> None:
        if not hasattr(stream, "write"):
            raise TypeError(f"stream must provide write(), got {type(stream).__name__}")
        self._stream = stream

    @property
    def key(self) -> Hashable:
        try:
            return self._stream.fileno()
        except (AttributeError, OSError, ValueError):
            return id(self._stream)

    @property
    def stream(self) -> Any:
        return self._stream

    def write_all(self, data: bytes) -> None:
        stream = self._stream
        if _is_text(stream):
            buffer = getattr(stream, "buffer", None)
            if buffer is None:
                stream.write(data.decode("utf-8"))
                _flush(stream)
                return
            _flush(stream)
            stream = buffer
        view = memoryview(data)
        while view:
            written = stream.write(view)
            if written is None:
                # Non-blocking raw streams return None when they would block.
                raise OSError(errno.EAGAIN, "stream not ready for writing")
            if written <= 0:
                raise OSError(errno.EIO, "stream write made no progress")
            view = view[written:]
        _flush(stream)

    def isatty(self) -> bool:
        try:
            return bool(self._stream.isatty())
        except (AttributeError, OSError, ValueError):
            return False

    def __repr__(self) -> str:
        return f"StreamOutput({self._stream!r})"


def _is_text(stream: Any) -> bool:
    if isinstance(stream, io.TextIOBase):
        return True
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return False
    return hasattr(stream, "encoding")


def _flush(stream: Any) -> None:
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()


def as_output(target: OutputPort | int | Any) -> OutputPort:
    """Coerce ``target`` into an :class:`OutputPort`.

    Integers are file descriptors, objects with ``write`` are streams, and
    ports pass through unchanged.
    """
    if isinstance(target, OutputPort):
        return target
    if isinstance(target, bool):
        raise TypeError("output target must be a file descriptor, stream, or OutputPort")
    if isinstance(target, int):
        return FileDescriptorOutput(target)
    if hasattr(target, "write"):
        return StreamOutput(target)
    raise TypeError(f"unsupported output target: {target!r}")


__all__ = ["FileDescriptorOutput", "STDERR", "STDOUT", "StreamOutput", "as_output"]
