"""Coaches — compiled validators and the steps they are built from.

A :class:`Coach` maps a value to a list of failure messages. ``isinstance``
against :class:`Coach` is the only tag the compilers consult to tell a
compiled validator apart from a raw predicate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

Predicate = Callable[[Any], Any]
Messages = list[Any]


class Coach(ABC):
    """Abstract base for compiled validators.

    Coaches are immutable once built and safe to call from any thread.
    """

    __slots__ = ()

    @abstractmethod
    def evaluate(self, value: Any) -> Messages:
        """Return the failure messages for *value* (empty when it passes)."""
        ...

    def __call__(self, value: Any) -> Messages:
        return self.evaluate(value)


def is_coach(obj: object) -> bool:
    """Return True if *obj* is a compiled validator."""
    return isinstance(obj, Coach)


class FunctionCoach(Coach):
    """Adapter that turns ``value -> iterable of messages`` into a Coach.

    Usage::

        @FunctionCoach
        def positive(value):
            return [] if value > 0 else ["must be positive"]
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[Any], Iterable[Any]]) -> None:
        self._func = func

    @property
    def func(self) -> Callable[[Any], Iterable[Any]]:
        return self._func

    def evaluate(self, value: Any) -> Messages:
        return list(self._func(value))

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"FunctionCoach({name})"


@dataclass(frozen=True)
class Check:
    """One ``(predicate, message)`` link of a chain."""

    predicate: Predicate
    message: Any

    def __call__(self, value: Any) -> Messages:
        if self.predicate(value):
            return []
        return [self.message]


Step = Check | Coach


class ChainCoach(Coach):
    """Short-circuiting chain: the first step that reports anything wins.

    A :class:`Check` reports its single message; an embedded Coach reports
    its whole output. Later steps run only while earlier ones stay silent.
    """

    __slots__ = ("_steps",)

    def __init__(self, steps: Iterable[Step]) -> None:
        self._steps: tuple[Step, ...] = tuple(steps)

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    def evaluate(self, value: Any) -> Messages:
        for step in self._steps:
            messages = step(value)
            if messages:
                return messages
        return []

    def __repr__(self) -> str:
        return f"ChainCoach(steps={len(self._steps)})"


class CollectionCoach(Coach):
    """Aggregating collection: every coach runs, outputs concatenate in order."""

    __slots__ = ("_coaches",)

    def __init__(self, coaches: Iterable[Coach]) -> None:
        self._coaches: tuple[Coach, ...] = tuple(coaches)

    @property
    def coaches(self) -> tuple[Coach, ...]:
        return self._coaches

    def evaluate(self, value: Any) -> Messages:
        messages: Messages = []
        for coach in self._coaches:
            messages.extend(coach(value))
        return messages

    def __repr__(self) -> str:
        return f"CollectionCoach(coaches={len(self._coaches)})"
