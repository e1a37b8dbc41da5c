"""Exception taxonomy for manners.

Structural problems in a declaration surface once, at compile time, as
:class:`MalformedRuleError`. Evaluation never raises on its own; only the
boundary helpers raise :class:`ValidationFailed`. Exceptions raised by a
predicate are not caught anywhere in the engine.
"""

from __future__ import annotations

from typing import Any


class MannersError(Exception):
    """Base class for every error raised by manners."""


class MalformedRuleError(MannersError, ValueError):
    """A manner declaration has a predicate without a paired message."""

    def __init__(self, message: str, *, declaration: tuple[Any, ...] = ()) -> None:
        super().__init__(message)
        self.declaration = declaration


class ValidationFailed(MannersError):
    """A value produced one or more failure messages.

    Attributes:
        messages: Every message the coach produced, in order.
        value: The value that failed validation.
    """

    def __init__(self, messages: list[Any], value: Any = None) -> None:
        self.messages = list(messages)
        self.value = value
        super().__init__("; ".join(str(m) for m in self.messages))


class RuleSetImportError(MannersError):
    """A ``module:attribute`` path could not be resolved to a rule set."""


class ConfigError(MannersError):
    """``manners.toml`` exists but is not valid TOML."""
