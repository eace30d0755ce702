"""Namespace grammar and glob pattern compilation.

Purpose
-------
Validate the two kinds of strings callers hand to the facade: namespaces
(``module``, ``module:feature``, ``module:feature/method[/variant...]``) and
the wildcard patterns used by level rules.

Contents
--------
* :func:`validate_namespace` / :func:`validate_pattern` - raise
  :class:`~lib_log_scribe.domain.errors.ArgumentError` subclasses.
* :func:`compile_pattern` - turn a validated pattern into an anchored matcher.
* :data:`ROOT_PATTERN` - the catch-all pattern ``"*"``.

System Role
-----------
Runs before any state mutation in ``get_log``/``set_level`` so failures surface
synchronously at the call that caused them.
"""

from __future__ import annotations

import re
from typing import Pattern

from .errors import InvalidNamespaceError, InvalidPatternError

ROOT_PATTERN = "*"

# Word characters are ASCII only: letters, digits and underscore.
_SEGMENT = r"[\w\-]+"
_NAMESPACE_RE = re.compile(rf"{_SEGMENT}(?::{_SEGMENT}(?:/{_SEGMENT})*)?", re.ASCII)
_PATTERN_RE = re.compile(r"[\w\-:/*]+", re.ASCII)


def validate_namespace(namespace: str | None) -> str:
    """Return ``namespace`` unchanged or raise :class:`InvalidNamespaceError`.

    Examples
    --------
    >>> validate_namespace("auth:login/validate")
    'auth:login/validate'
    """
    if not namespace:
        raise InvalidNamespaceError("namespace", "a namespace must be provided when acquiring logs")
    if not isinstance(namespace, str) or _NAMESPACE_RE.fullmatch(namespace) is None:
        raise InvalidNamespaceError(
            "namespace",
            f"invalid namespace {namespace!r} (expected module[:feature[/method...]])",
        )
    return namespace


def validate_pattern(pattern: str | None) -> str:
    """Return ``pattern`` unchanged or raise :class:`InvalidPatternError`.

    Patterns need not be well-formed namespaces; only the alphabet is checked.

    Examples
    --------
    >>> validate_pattern("*:*/methodA")
    '*:*/methodA'
    """
    if not pattern:
        raise InvalidPatternError("pattern", "a namespace pattern must be provided")
    if not isinstance(pattern, str) or _PATTERN_RE.fullmatch(pattern) is None:
        raise InvalidPatternError(
            "pattern",
            f"invalid namespace pattern {pattern!r} (allowed: word characters, '-', ':', '/', '*')",
        )
    return pattern


def compile_pattern(pattern: str) -> Pattern[str]:
    """Compile a glob pattern into a matcher anchored to the whole namespace.

    Literal characters are escaped; each ``*`` matches any run of characters,
    separators included.

    Examples
    --------
    >>> matcher = compile_pattern("moduleA:*")
    >>> bool(matcher.match("moduleA:featureA/methodB"))
    True
    >>> bool(matcher.match("moduleB:x"))
    False
    """
    body = ".*".join(re.escape(part) for part in pattern.split("*"))
    return re.compile(rf"\A{body}\Z", re.DOTALL)


__all__ = ["ROOT_PATTERN", "compile_pattern", "validate_namespace", "validate_pattern"]
