"""Process-wide memoization of compiled rule sets.

Rule sets are usually list literals, so they cannot key a dict directly.
:func:`rule_set_key` folds a rule set into a hashable structural key:
nested lists/tuples become tuples, hashable leaves key by ``(type, value)``
and unhashable leaves by identity. Entries keep a reference to the rule
set they were built from, so an identity key is never reused while the
entry lives. Entries are never evicted.

INVARIANT: at most one compiled coach per key is ever handed out.
Population is insert-if-absent under a lock; lookups of an existing entry
take the same lock only briefly and evaluation of a coach takes none.

Predicates inside a cached rule set must be pure. An impure predicate
makes the cached coach stale without any way to detect it.
"""

from __future__ import annotations

import threading
from collections.abc import Hashable
from typing import TYPE_CHECKING, Any

from manners.coach import Coach, is_coach
from manners.compiler import compile_rule_set
from manners.config.logging import get_logger
from manners.result import CacheInfo

if TYPE_CHECKING:
    from manners.config.settings import MannersSettings

logger = get_logger(__name__)


def rule_set_key(rule_set: Any) -> Hashable:
    """Build a hashable structural key for *rule_set*."""
    if isinstance(rule_set, (list, tuple)):
        return (type(rule_set).__name__, tuple(rule_set_key(m) for m in rule_set))
    if is_coach(rule_set) or callable(rule_set):
        return ("id", id(rule_set))
    try:
        hash(rule_set)
    except TypeError:
        return ("id", id(rule_set))
    return (type(rule_set), rule_set)


class CoachCache:
    """Insert-if-absent table of compiled coaches keyed by rule set.

    Parameters:
        enabled: When False every lookup compiles afresh and nothing is stored.
    """

    def __init__(self, *, enabled: bool = True) -> None:
        self._enabled = enabled
        self._entries: dict[Hashable, tuple[Any, Coach]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @classmethod
    def from_settings(cls, settings: MannersSettings) -> CoachCache:
        return cls(enabled=settings.cache.enabled)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def get_or_compile(self, rule_set: Any) -> Coach:
        """Return the coach for *rule_set*, compiling it on first sight."""
        if is_coach(rule_set):
            return rule_set
        if not self._enabled:
            return compile_rule_set(rule_set)

        key = rule_set_key(rule_set)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                self._hits += 1
                return entry[1]
            # Compiling under the lock keeps one canonical coach per key.
            coach = compile_rule_set(rule_set)
            self._entries[key] = (rule_set, coach)
            self._misses += 1
            size = len(self._entries)
        logger.debug("cache.miss", kind=type(coach).__name__, cache_size=size)
        return coach

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("cache.cleared", dropped=dropped)

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(
                hits=self._hits,
                misses=self._misses,
                size=len(self._entries),
                enabled=self._enabled,
            )

    def __len__(self) -> int:
        return len(self._entries)


_default_cache: CoachCache | None = None
_default_lock = threading.Lock()


def default_cache() -> CoachCache:
    """Return the process-wide cache, building it from settings on first use."""
    global _default_cache
    if _default_cache is None:
        with _default_lock:
            if _default_cache is None:
                from manners.config.settings import MannersSettings

                _default_cache = CoachCache.from_settings(MannersSettings())
    return _default_cache


def set_default_cache(cache: CoachCache | None) -> None:
    """Replace the process-wide cache; ``None`` rebuilds it lazily from settings."""
    global _default_cache
    with _default_lock:
        _default_cache = cache


def get_or_compile(rule_set: Any) -> Coach:
    """Cached compilation of *rule_set* through the process-wide cache."""
    return default_cache().get_or_compile(rule_set)


def clear_cache() -> None:
    default_cache().clear()


def cache_info() -> CacheInfo:
    return default_cache().info()
