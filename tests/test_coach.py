"""Tests for coach types and the coach tag."""

from __future__ import annotations

import dataclasses

import pytest

from manners.coach import ChainCoach, Check, Coach, CollectionCoach, FunctionCoach, is_coach
from tests.conftest import even


class TestIsCoach:
    def test_compiled_coaches_are_tagged(self) -> None:
        assert is_coach(ChainCoach([]))
        assert is_coach(CollectionCoach([]))
        assert is_coach(FunctionCoach(lambda v: []))

    def test_plain_callables_are_not(self) -> None:
        assert not is_coach(even)
        assert not is_coach(lambda v: [])
        assert not is_coach(Check(even, "m"))

    def test_coach_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Coach()  # type: ignore[abstract]


class TestFunctionCoach:
    def test_materializes_generator_output(self) -> None:
        def positive(value: int):
            if value <= 0:
                yield "must be positive"
            if value % 2:
                yield "must be even"

        coach = FunctionCoach(positive)
        assert coach(-1) == ["must be positive", "must be even"]
        assert coach(2) == []

    def test_decorator_usage(self) -> None:
        @FunctionCoach
        def always(value: object) -> list[str]:
            return ["no"]

        assert always(None) == ["no"]
        assert "always" in repr(always)


class TestCheck:
    def test_pass_and_fail(self) -> None:
        step = Check(even, "must be even")
        assert step(2) == []
        assert step(3) == ["must be even"]

    def test_frozen(self) -> None:
        step = Check(even, "must be even")
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.message = "other"  # type: ignore[misc]


class TestImmutability:
    def test_chain_steps_are_a_tuple(self) -> None:
        steps = [Check(even, "m")]
        coach = ChainCoach(steps)
        steps.append(Check(even, "n"))
        assert len(coach.steps) == 1

    def test_collection_has_no_instance_dict(self) -> None:
        coach = CollectionCoach([])
        with pytest.raises(AttributeError):
            coach.extra = 1  # type: ignore[attr-defined]

    def test_fresh_output_per_call(self) -> None:
        coach = CollectionCoach([ChainCoach([Check(even, "m")])])
        first = coach(1)
        first.append("mutated")
        assert coach(1) == ["m"]
