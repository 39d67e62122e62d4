"""Configuration helpers: ``.env`` loading and environment-variable parsing.

Purpose
-------
Give the CLI and :func:`lib_log_clt.runtime.init` one place that decides
whether a nearby ``.env`` file is loaded and how ``LOG_*`` variables are read.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle variable for ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – python-dotenv wiring.
* :func:`env_bool` / :func:`env_flag` / :func:`env_text` – typed readers.

System Role
-----------
Outer configuration layer. Existing environment variables always win over
values found in ``.env``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import RLock

from dotenv import find_dotenv, load_dotenv

LOGGER = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LIB_LOG_CLT_USE_DOTENV"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

_DOTENV_LOCK = RLock()
_DOTENV_LOADED: Path | None = None


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = '0'
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of 1/0, true/false, yes/no, on/off; got {value!r}")


def env_flag(name: str) -> bool:
    """Return ``True`` when ``name`` is set to any non-empty value (``NO_COLOR`` convention)."""
    return bool(os.getenv(name, "").strip())


def env_text(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether ``.env`` is loaded; an explicit CLI flag wins over the variable.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="1")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUE_VALUES


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` (searching upwards) without overriding set variables.

    Returns the resolved path of the loaded file, or ``None`` when no file was
    found.
    """
    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        if search_from is not None:
            candidate = _search_upwards(search_from)
        else:
            found = find_dotenv(usecwd=True)
            candidate = Path(found).resolve() if found else None
        if candidate is None:
            LOGGER.debug("no .env file found")
            return None
        load_dotenv(candidate, override=False)
        _DOTENV_LOADED = candidate
        LOGGER.debug("loaded environment from %s", candidate)
        return candidate


def loaded_dotenv() -> Path | None:
    with _DOTENV_LOCK:
        return _DOTENV_LOADED


def _search_upwards(start: Path) -> Path | None:
    directory = start.resolve()
    if directory.is_file():
        directory = directory.parent
    for folder in (directory, *directory.parents):
        candidate = folder / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None


__all__ = [
    "DOTENV_ENV_VAR",
    "enable_dotenv",
    "env_bool",
    "env_flag",
    "env_text",
    "loaded_dotenv",
    "should_use_dotenv",
]
