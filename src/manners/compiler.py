"""Compilation of manners (chains) and etiquettes (collections) into coaches.

A manner is declared flat, optionally led by an already-compiled coach::

    [coach?, predicate, message, predicate, message, ...]

An etiquette is a sequence of manners and/or coaches. Chains group
dependent checks and stop at the first failure; collections group
independent chains and always report every one of them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from manners.coach import ChainCoach, Check, Coach, CollectionCoach, Step, is_coach
from manners.config.logging import get_logger
from manners.errors import MalformedRuleError

logger = get_logger(__name__)


def normalize(*declaration: Any) -> tuple[Step, ...]:
    """Partition a flat manner declaration into ordered steps.

    A leading coach becomes the first step; everything after it is taken
    two at a time as ``(predicate, message)``. Predicates are never called.

    Raises:
        MalformedRuleError: A predicate is left without a message.
    """
    steps: list[Step] = []
    rest = declaration
    if rest and is_coach(rest[0]):
        steps.append(rest[0])
        rest = rest[1:]

    if len(rest) % 2:
        msg = f"Dangling predicate without a message: {rest[-1]!r}"
        raise MalformedRuleError(msg, declaration=declaration)

    for predicate, message in zip(rest[::2], rest[1::2], strict=True):
        steps.append(Check(predicate, message))
    return tuple(steps)


def compile_chain(*steps: Any) -> Coach:
    """Compile one manner into a short-circuiting coach.

    A sole argument that is already a coach is returned unchanged.
    """
    if len(steps) == 1 and is_coach(steps[0]):
        return steps[0]
    return ChainCoach(normalize(*steps))


def compile_collection(*manners: Any) -> Coach:
    """Compile an etiquette into an aggregating coach.

    Each element is either a coach or a sequence compiled with
    :func:`compile_chain`. A sole coach argument is returned unchanged.
    """
    if len(manners) == 1 and is_coach(manners[0]):
        return manners[0]
    return CollectionCoach(_compile_member(m) for m in manners)


def _compile_member(member: Any) -> Coach:
    if is_coach(member):
        return member
    return compile_chain(*member)


def is_etiquette(rule_set: Sequence[Any]) -> bool:
    """Return True if *rule_set* reads as a collection of manners.

    Every element must be a coach or a nested list/tuple. Anything else
    (a bare predicate or message at the top level) makes it a single manner.
    """
    return all(is_coach(m) or isinstance(m, (list, tuple)) for m in rule_set)


def compile_rule_set(rule_set: Any) -> Coach:
    """Compile a coach, a manner or an etiquette, whichever *rule_set* is."""
    if is_coach(rule_set):
        return rule_set
    members = tuple(rule_set)
    if is_etiquette(members):
        logger.debug("coach.compiled", kind="etiquette", members=len(members))
        return compile_collection(*members)
    logger.debug("coach.compiled", kind="manner", members=len(members))
    return compile_chain(*members)


manner = compile_chain
etiquette = compile_collection
