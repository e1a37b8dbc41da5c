"""Evaluation entry points built on the coach cache.

``rule_set`` may be a coach, a manner or an etiquette; it is compiled
once through :func:`manners.cache.get_or_compile` and reused afterwards.
"""

from __future__ import annotations

from typing import Any

from manners.cache import get_or_compile
from manners.coach import Coach
from manners.errors import ValidationFailed
from manners.result import ValidationReport


def evaluate(coach: Coach, value: Any) -> list[Any]:
    """Run an already-compiled *coach* against *value*."""
    return coach(value)


def errors(rule_set: Any, value: Any) -> list[Any]:
    """Return every failure message *value* produces under *rule_set*."""
    return evaluate(get_or_compile(rule_set), value)


def is_valid(rule_set: Any, value: Any) -> bool:
    return not errors(rule_set, value)


def is_invalid(rule_set: Any, value: Any) -> bool:
    return bool(errors(rule_set, value))


def raise_for_messages(messages: list[Any], value: Any) -> Any:
    """Return *value* when *messages* is empty, else raise ValidationFailed."""
    if messages:
        raise ValidationFailed(messages, value)
    return value


def assert_valid(rule_set: Any, value: Any) -> Any:
    """Return *value* unchanged if it passes, else raise.

    Raises:
        ValidationFailed: Carrying every message, in order.
    """
    return raise_for_messages(errors(rule_set, value), value)


def check(rule_set: Any, value: Any) -> ValidationReport:
    """Validate *value* and wrap the outcome in a ValidationReport."""
    return ValidationReport.from_messages(value, errors(rule_set, value))


class Manners(Coach):
    """An etiquette bound once, validated many times.

    A ``Manners`` is itself a coach, so it can lead a manner or sit inside
    an etiquette like any other compiled validator.

    Usage::

        age = Manners([int_like, "must be a number", adult, "must be 18+"])
        age.is_valid(21)
        age.assert_valid(12)  # raises ValidationFailed
    """

    __slots__ = ("_rule_set",)

    def __init__(self, *rule_set: Any) -> None:
        if len(rule_set) == 1 and not isinstance(rule_set[0], (list, tuple)):
            self._rule_set: Any = rule_set[0]
        else:
            self._rule_set = list(rule_set)

    @property
    def coach(self) -> Coach:
        return get_or_compile(self._rule_set)

    def evaluate(self, value: Any) -> list[Any]:
        return self.coach(value)

    errors = evaluate

    def is_valid(self, value: Any) -> bool:
        return not self.evaluate(value)

    def is_invalid(self, value: Any) -> bool:
        return bool(self.evaluate(value))

    def assert_valid(self, value: Any) -> Any:
        return raise_for_messages(self.evaluate(value), value)

    def check(self, value: Any) -> ValidationReport:
        return ValidationReport.from_messages(value, self.evaluate(value))

    def __repr__(self) -> str:
        return f"Manners({self._rule_set!r})"
