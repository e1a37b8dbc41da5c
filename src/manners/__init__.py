"""manners — compose predicate/message pairs into reusable validators.

A *manner* is a short-circuiting chain of checks, an *etiquette* is a
collection of manners whose findings are all reported, and a *coach* is
the compiled validator either one turns into::

    from manners import etiquette, is_valid

    even = lambda n: n % 2 == 0
    coach = etiquette([even, "must be even"], [lambda n: n >= 19, "must be >= 19"])
    coach(1)  # ["must be even", "must be >= 19"]
"""

from __future__ import annotations

from manners.cache import CoachCache, cache_info, clear_cache, get_or_compile
from manners.coach import ChainCoach, Check, Coach, CollectionCoach, FunctionCoach, is_coach
from manners.compiler import (
    compile_chain,
    compile_collection,
    compile_rule_set,
    etiquette,
    manner,
    normalize,
)
from manners.errors import ConfigError, MalformedRuleError, MannersError, ValidationFailed
from manners.result import CacheInfo, ValidationReport
from manners.validation import (
    Manners,
    assert_valid,
    check,
    errors,
    evaluate,
    is_invalid,
    is_valid,
)

__version__ = "0.1.0"

__all__ = [
    "CacheInfo",
    "ChainCoach",
    "Check",
    "Coach",
    "ConfigError",
    "CoachCache",
    "CollectionCoach",
    "FunctionCoach",
    "MalformedRuleError",
    "Manners",
    "MannersError",
    "ValidationFailed",
    "ValidationReport",
    "assert_valid",
    "cache_info",
    "check",
    "clear_cache",
    "compile_chain",
    "compile_collection",
    "compile_rule_set",
    "errors",
    "etiquette",
    "evaluate",
    "get_or_compile",
    "is_coach",
    "is_invalid",
    "is_valid",
    "manner",
    "normalize",
]
