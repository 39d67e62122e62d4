"""Deterministic single-line rendering of log metadata.

Purpose
-------
Serialise a mapping of string keys to polymorphic metadata values into the
bracketed form prepended to every message, e.g. ``[req: "2", user: "a"] ``.

Contents
--------
* :data:`MetadataValue` – accepted value shapes.
* :func:`render_metadata` / :func:`render_value` – the renderer.
* :func:`merge_metadata` – call-site over base merge.
* :class:`MetadataCache` – base metadata with its precomputed rendering.

System Role
-----------
Keys are sorted so equal content always renders to identical bytes. Escaping
keeps quotes, backslashes and line breaks from breaking the one-line format.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

MetadataValue = Union[str, Sequence["MetadataValue"], Mapping[str, "MetadataValue"], object]
Metadata = Mapping[str, MetadataValue]

_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        '"': '\\"',
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
    }
)

EMPTY_NESTED = "[:]"


def escape(text: str) -> str:
    """Escape backslashes, double quotes and line breaks.

    Examples
    --------
    >>> escape('say "hi"\\n')
    'say \\\\"hi\\\\"\\\\n'
    """
    return text.translate(_ESCAPES)


def quote(text: str) -> str:
    return '"' + escape(text) + '"'


def render_value(value: MetadataValue) -> str:
    """Render one metadata value.

    Strings and arbitrary objects are quoted scalars, sequences render as
    ``[a, b]`` and mappings recurse with an explicit ``[:]`` when empty.

    Examples
    --------
    >>> render_value("x")
    '"x"'
    >>> render_value(["a", 1])
    '["a", "1"]'
    >>> render_value({})
    '[:]'
    >>> render_value({"b": "2", "a": ["1"]})
    '[a: ["1"], b: "2"]'
    """
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, Mapping):
        return _bracketed(value, force_non_empty=True)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return "[" + ", ".join(render_value(item) for item in value) + "]"
    return quote(str(value))


def _bracketed(metadata: Metadata, *, force_non_empty: bool) -> str:
    if not metadata:
        return EMPTY_NESTED if force_non_empty else ""
    pairs = sorted(metadata.items(), key=lambda item: str(item[0]))
    return "[" + ", ".join(f"{escape(str(key))}: {render_value(value)}" for key, value in pairs) + "]"


def render_metadata(metadata: Metadata | None, *, force_non_empty: bool = False) -> str:
    """Return the metadata block for a log line, with its trailing space.

    Examples
    --------
    >>> render_metadata({})
    ''
    >>> render_metadata({}, force_non_empty=True)
    '[:] '
    >>> render_metadata({"user": "a", "req": "2"})
    '[req: "2", user: "a"] '
    """
    block = _bracketed(metadata or {}, force_non_empty=force_non_empty)
    return block + " " if block else ""


def merge_metadata(base: Metadata, call: Metadata | None) -> dict[str, MetadataValue]:
    """Return ``base`` updated with ``call``; call-site keys win."""
    merged = dict(base)
    if call:
        merged.update(call)
    return merged


@dataclass(frozen=True)
class _Snapshot:
    metadata: Mapping[str, MetadataValue]
    rendered: str


class MetadataCache:
    """Base metadata paired with its precomputed rendering.

    Mutations rebuild the rendering and publish ``(metadata, rendering)`` as
    one snapshot, so readers never see one without the other.

    Examples
    --------
    >>> cache = MetadataCache({"req": "1"})
    >>> cache.render()
    '[req: "1"] '
    >>> cache.render({"req": "2", "user": "a"})
    '[req: "2", user: "a"] '
    >>> cache.set("req", None)
    >>> cache.render()
    ''
    """

    def __init__(self, metadata: Metadata | None = None) -> None:
        self._lock = threading.Lock()
        self._snapshot = self._build({key: value for key, value in (metadata or {}).items() if value is not None})

    @staticmethod
    def _build(metadata: dict[str, MetadataValue]) -> _Snapshot:
        return _Snapshot(MappingProxyType(metadata), render_metadata(metadata))

    @property
    def metadata(self) -> Mapping[str, MetadataValue]:
        return self._snapshot.metadata

    @property
    def rendered(self) -> str:
        return self._snapshot.rendered

    def replace(self, metadata: Metadata | None) -> None:
        """Swap in ``metadata``; keys mapped to ``None`` are dropped."""
        with self._lock:
            self._snapshot = self._build({key: value for key, value in (metadata or {}).items() if value is not None})

    def set(self, key: str, value: MetadataValue | None) -> None:
        """Set ``key`` to ``value``; ``None`` removes the key."""
        with self._lock:
            updated = dict(self._snapshot.metadata)
            if value is None:
                updated.pop(key, None)
            else:
                updated[key] = value
            self._snapshot = self._build(updated)

    def update(self, values: Metadata) -> None:
        """Merge ``values``; keys mapped to ``None`` are removed, as with :meth:`set`."""
        with self._lock:
            updated = dict(self._snapshot.metadata)
            for key, value in values.items():
                if value is None:
                    updated.pop(key, None)
                else:
                    updated[key] = value
            self._snapshot = self._build(updated)

    def render(self, call: Metadata | None = None) -> str:
        """Render base metadata merged with ``call``; reuses the cache when ``call`` is empty."""
        snapshot = self._snapshot
        if not call:
            return snapshot.rendered
        return render_metadata(merge_metadata(snapshot.metadata, call))

    def __repr__(self) -> str:
        return f"MetadataCache({dict(self._snapshot.metadata)!r})"


def coerce_metadata(value: Any) -> dict[str, MetadataValue]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f"metadata must be a mapping, got {type(value).__name__}")
    return {str(key): item for key, item in value.items()}


__all__ = [
    "EMPTY_NESTED",
    "Metadata",
    "MetadataCache",
    "MetadataValue",
    "coerce_metadata",
    "escape",
    "merge_metadata",
    "quote",
    "render_metadata",
    "render_value",
]
