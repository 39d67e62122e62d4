"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_clt"
title = "Concurrent-safe console logging for command-line tools"
version = "1.0.0"
homepage = "https://github.com/bitranox/lib_log_clt"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_clt"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner through ``writer`` (stdout by default) one line at a time.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_clt:\\n'
    """
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")
