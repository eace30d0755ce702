"""Ordered pattern-to-level rules and namespace resolution.

Purpose
-------
Store the glob rules that decide each namespace's threshold and resolve the
effective level for any namespace.

Contents
--------
* :class:`LevelRule` - immutable ``(pattern, matcher, level)`` triple.
* :class:`LevelRegistry` - ordered rule list with the permanent root rule.
* :data:`DEFAULT_ROOT_LEVEL` - threshold of the root rule after construction
  or :meth:`LevelRegistry.reset`.

System Role
-----------
Matching is first-match-wins by recency: :meth:`LevelRegistry.set_level`
always inserts at the front, so a broad rule registered after a narrow one
outranks it. Pattern specificity plays no part.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Pattern

from .errors import IllegalStateError
from .levels import LogLevel, coerce_level
from .namespaces import ROOT_PATTERN, compile_pattern, validate_pattern

DEFAULT_ROOT_LEVEL = LogLevel.ERROR


@dataclass(slots=True, frozen=True)
class LevelRule:
    """A namespace pattern bound to a threshold.

    Attributes
    ----------
    pattern:
        Source pattern exactly as registered; identical strings override.
    matcher:
        Anchored regex compiled by :func:`compile_pattern`.
    level:
        Threshold applied to matching namespaces.
    """

    pattern: str
    matcher: Pattern[str]
    level: LogLevel

    def matches(self, namespace: str | None) -> bool:
        """Return ``True`` when ``namespace`` (``None`` for root) matches."""

        return self.matcher.match(namespace or "") is not None


def _root_rule() -> LevelRule:
    return LevelRule(ROOT_PATTERN, compile_pattern(ROOT_PATTERN), DEFAULT_ROOT_LEVEL)


class LevelRegistry:
    """Ordered list of :class:`LevelRule` objects, newest first.

    The root rule ``("*", ERROR)`` sits at the tail and is never removed by
    :meth:`set_level`; overriding ``"*"`` replaces it at the front, which still
    leaves a catch-all in the list.

    Examples
    --------
    >>> registry = LevelRegistry()
    >>> _ = registry.set_level("a:*", "trace")
    >>> _ = registry.set_level("a:b/*", "warn")
    >>> registry.resolve_level("a:b/method").severity
    'warn'
    >>> registry.resolve_level("other").severity
    'error'
    """

    def __init__(self) -> None:
        self._rules: list[LevelRule] = [_root_rule()]

    @property
    def rules(self) -> tuple[LevelRule, ...]:
        """Snapshot of the rules in match order."""

        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[LevelRule]:
        return iter(tuple(self._rules))

    def set_level(self, pattern: str, level: str | LogLevel) -> LevelRule:
        """Register ``pattern`` at ``level`` ahead of every existing rule.

        Both inputs are validated before the list changes, so a failure leaves
        the registry untouched.
        """
        validate_pattern(pattern)
        resolved = coerce_level(level)
        rule = LevelRule(pattern, compile_pattern(pattern), resolved)

        self._rules = [existing for existing in self._rules if existing.pattern != pattern]
        self._rules.insert(0, rule)
        return rule

    def resolve_level(self, namespace: str | None) -> LogLevel:
        """Return the level of the first rule matching ``namespace``."""

        for rule in self._rules:
            if rule.matches(namespace):
                return rule.level
        raise IllegalStateError(f"Unable to find matching level for namespace: {namespace!r}")

    def reset(self) -> None:
        """Drop every custom rule, leaving only the root rule."""

        self._rules = [_root_rule()]


__all__ = ["DEFAULT_ROOT_LEVEL", "LevelRegistry", "LevelRule"]
