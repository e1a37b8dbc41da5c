"""ValidationReport and CacheInfo — frozen result envelopes.

Callers that prefer a value to an exception use :func:`manners.check`,
which wraps a coach's output in a :class:`ValidationReport`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ValidationReport(BaseModel):
    """Outcome of validating one value against one rule set.

    Attributes:
        ok: Whether the value produced no messages.
        value: The value that was validated.
        messages: Failure messages in the order the coach produced them.
    """

    model_config = {"frozen": True}

    ok: bool
    value: Any = None
    messages: list[Any] = Field(default_factory=list)

    @classmethod
    def from_messages(cls, value: Any, messages: list[Any]) -> ValidationReport:
        return cls(ok=not messages, value=value, messages=list(messages))


class CacheInfo(BaseModel):
    """Counters for a :class:`~manners.cache.CoachCache`."""

    model_config = {"frozen": True}

    hits: int = 0
    misses: int = 0
    size: int = 0
    enabled: bool = True
