"""Shared pytest fixtures and test helpers for manners tests."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest
from click.testing import CliRunner

from manners.cache import CoachCache, set_default_cache


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def coach_cache() -> Generator[CoachCache]:
    """Fresh process-wide cache per test so hit/miss counts start at zero."""
    cache = CoachCache()
    set_default_cache(cache)
    try:
        yield cache
    finally:
        set_default_cache(None)


# ---------------------------------------------------------------------------
# Shared predicates (used across test modules)
# ---------------------------------------------------------------------------


def even(n: int) -> bool:
    return n % 2 == 0


def divisible_by_6(n: int) -> bool:
    return n % 6 == 0


def gte_19(n: int) -> bool:
    return n >= 19


def has_a(m: dict[str, Any]) -> bool:
    return "a" in m


def a_is_number(m: dict[str, Any]) -> bool:
    return isinstance(m["a"], (int, float))


def has_b(m: dict[str, Any]) -> bool:
    return "b" in m


def b_is_vector(m: dict[str, Any]) -> bool:
    return isinstance(m["b"], list)


class CallCounter:
    """Predicate spy that records every value it sees."""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.calls: list[Any] = []

    def __call__(self, value: Any) -> bool:
        self.calls.append(value)
        return self.result
