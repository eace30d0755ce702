"""Environment and ``.env`` configuration.

Purpose
-------
Let operators tune namespace levels and console output without code changes.
Values come from the process environment, optionally seeded from the nearest
``.env`` file via :mod:`dotenv`. Existing environment variables always win over
``.env`` entries.

Contents
--------
* Environment variable names (``LOG_LEVELS``, ``LOG_NO_COLOR``, ...).
* :func:`parse_levels` / :func:`env_bool` - value parsing helpers.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` loading.
* :func:`configure_from_env` - apply everything to a :class:`Scribe`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from lib_log_scribe.adapters.transforms import PrefixTransform
from lib_log_scribe.adapters.writers import ConsoleWriter
from lib_log_scribe.domain import LogLevel, coerce_level, validate_pattern
from lib_log_scribe.runtime import Scribe, current_scribe

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_USE_DOTENV"
LEVELS_ENV_VAR = "LOG_LEVELS"
NO_COLOR_ENV_VAR = "LOG_NO_COLOR"
FORCE_COLOR_ENV_VAR = "LOG_FORCE_COLOR"
PREFIX_ENV_VAR = "LOG_PREFIX_FORMAT"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_PATH: Path | None = None


def env_bool(name: str, default: bool, environ: Mapping[str, str] | None = None) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> env_bool("LOG_EXAMPLE_BOOL", True, environ={})
    True
    >>> env_bool("LOG_EXAMPLE_BOOL", True, environ={"LOG_EXAMPLE_BOOL": "0"})
    False
    """
    source = os.environ if environ is None else environ
    value = source.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def parse_levels(raw: str | None) -> list[tuple[str, LogLevel]]:
    """Parse ``pattern=level`` comma-separated rules.

    Entries keep their order; blank chunks are skipped. Malformed entries raise
    :class:`ValueError` naming the entry.

    Examples
    --------
    >>> parse_levels("*=warn, auth:*=debug")
    [('*', <LogLevel.WARN: 3>), ('auth:*', <LogLevel.DEBUG: 1>)]
    >>> parse_levels(None)
    []
    """
    if not raw:
        return []
    result: list[tuple[str, LogLevel]] = []
    for chunk in raw.split(","):
        entry = chunk.strip()
        if not entry:
            continue
        pattern, sep, level = entry.partition("=")
        if not sep:
            raise ValueError(f"{LEVELS_ENV_VAR} entry {entry!r} must look like PATTERN=LEVEL")
        pattern = pattern.strip()
        try:
            validate_pattern(pattern)
            resolved = coerce_level(level)
        except ValueError as exc:
            raise ValueError(f"{LEVELS_ENV_VAR} entry {entry!r} is invalid: {exc}") from exc
        result.append((pattern, resolved))
    return result


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI flag beats the environment.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="1")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks upwards from ``search_from`` (default: the working
    directory). Returns the resolved path that was loaded, or ``None``.
    Repeated calls return the first loaded path without reloading.
    """
    global _DOTENV_PATH
    if _DOTENV_PATH is not None:
        return _DOTENV_PATH

    if search_from is not None:
        candidate = _find_upwards(search_from)
    else:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    if candidate is None:
        logger.debug("no .env file found")
        return None

    load_dotenv(candidate, override=False)
    _DOTENV_PATH = candidate.resolve()
    logger.debug("loaded environment from %s", _DOTENV_PATH)
    return _DOTENV_PATH


def configure_from_env(scribe: Scribe | None = None, environ: Mapping[str, str] | None = None) -> Scribe:
    """Apply ``LOG_*`` settings to ``scribe`` (default: the process scribe).

    * ``LOG_LEVELS`` rules are registered left to right.
    * ``LOG_NO_COLOR`` / ``LOG_FORCE_COLOR`` install a matching
      :class:`ConsoleWriter` when either is set.
    * ``LOG_PREFIX_FORMAT`` installs a :class:`PrefixTransform`.

    All values are parsed before the scribe is touched.
    """
    source = os.environ if environ is None else environ
    target = scribe if scribe is not None else current_scribe()

    levels = parse_levels(source.get(LEVELS_ENV_VAR))
    writer = None
    if NO_COLOR_ENV_VAR in source or FORCE_COLOR_ENV_VAR in source:
        writer = ConsoleWriter(
            no_color=env_bool(NO_COLOR_ENV_VAR, False, source),
            force_color=env_bool(FORCE_COLOR_ENV_VAR, False, source),
        )
    prefix = source.get(PREFIX_ENV_VAR)
    transform = PrefixTransform(prefix) if prefix else None

    target.configure(levels=levels, writer=writer, transform=transform)
    return target


def _find_upwards(start: Path) -> Path | None:
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    """Forget which ``.env`` was loaded so tests start from a clean slate."""

    global _DOTENV_PATH
    _DOTENV_PATH = None


__all__ = [
    "DOTENV_ENV_VAR",
    "FORCE_COLOR_ENV_VAR",
    "LEVELS_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "PREFIX_ENV_VAR",
    "configure_from_env",
    "enable_dotenv",
    "env_bool",
    "parse_levels",
    "should_use_dotenv",
]
