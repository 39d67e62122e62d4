"""Shared pytest markers describing platform assumptions of a test module."""

from __future__ import annotations

import sys

import pytest

OS_AGNOSTIC = pytest.mark.os_agnostic
"""Behaviour that does not depend on the host operating system."""

POSIX_ONLY = pytest.mark.skipif(sys.platform.startswith("win"), reason="requires POSIX file descriptors")

__all__ = ["OS_AGNOSTIC", "POSIX_ONLY"]
