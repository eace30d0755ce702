"""Process-wide default scribe and access helpers."""

from __future__ import annotations

from threading import RLock

from ._scribe import Scribe

_STATE: Scribe | None = None
_STATE_LOCK = RLock()


def set_scribe(scribe: Scribe) -> Scribe:
    """Install ``scribe`` as the process default and return it."""

    with _STATE_LOCK:
        global _STATE
        _STATE = scribe
        return scribe


def clear_scribe() -> None:
    """Forget the process default; the next access builds a fresh one."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_scribe() -> Scribe:
    """Return the process default, creating it on first access."""

    with _STATE_LOCK:
        global _STATE
        if _STATE is None:
            _STATE = Scribe()
        return _STATE


def has_scribe() -> bool:
    """Return ``True`` once a default scribe exists."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = ["clear_scribe", "current_scribe", "has_scribe", "set_scribe"]
