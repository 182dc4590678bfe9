"""Monad laws and lift neutrality hold for every container family."""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

import pytest

from statedo import Parser, State, StateEither, StateResult, bind, lift
from statedo import parser, state, state_either, state_result
from tests.helpers.results import outcome


@dataclass(frozen=True)
class Family:
    """One container family and how to compare its runs."""

    cls: type
    mod: typing.Any
    observe: Callable[[typing.Any], typing.Any]

    def run(self, initial: typing.Any, m: typing.Any) -> typing.Any:
        return self.observe(self.mod.run(initial, m))

    @property
    def can_fail(self) -> bool:
        return hasattr(self.mod, "throw")


def _observe_either(ser: typing.Any) -> typing.Any:
    return (ser.state, outcome(ser.result))


FAMILIES = [
    pytest.param(Family(State, state, lambda pair: pair), id="State"),
    pytest.param(Family(StateResult, state_result, outcome), id="StateResult"),
    pytest.param(Family(StateEither, state_either, _observe_either), id="StateEither"),
    pytest.param(Family(Parser, parser, outcome), id="Parser"),
]

INITIAL_STATES = [0, 4, 10]
VALUES = [1, 6]


def computation(fam: Family) -> typing.Any:
    """get, put(s + 1), pure(s * 2)"""
    mod = fam.mod
    return mod.get().then(lambda s: mod.put(s + 1).then(lambda _: mod.pure(s * 2)))


def step_f(fam: Family) -> Callable[[int], typing.Any]:
    mod = fam.mod

    def f(a: int) -> typing.Any:
        if fam.can_fail and a > 5:
            return mod.throw(f"too big: {a}")
        return mod.put(a + 3).then(lambda _: mod.pure(a - 1))

    return f


def step_g(fam: Family) -> Callable[[int], typing.Any]:
    mod = fam.mod

    def g(b: int) -> typing.Any:
        return mod.get().then(lambda s: mod.pure(s * b))

    return g


@pytest.mark.parametrize("fam", FAMILIES)
@pytest.mark.parametrize("s0", INITIAL_STATES)
@pytest.mark.parametrize("a", VALUES)
def test_left_identity(fam: Family, s0: int, a: int):
    f = step_f(fam)
    left = bind(lift(fam.cls, a), f)
    right = f(a)
    assert fam.run(s0, left) == fam.run(s0, right)


@pytest.mark.parametrize("fam", FAMILIES)
@pytest.mark.parametrize("s0", INITIAL_STATES)
def test_right_identity(fam: Family, s0: int):
    left = bind(computation(fam), lambda a: lift(fam.cls, a))
    right = computation(fam)
    assert fam.run(s0, left) == fam.run(s0, right)


@pytest.mark.parametrize("fam", FAMILIES)
@pytest.mark.parametrize("s0", INITIAL_STATES)
def test_associativity(fam: Family, s0: int):
    f, g = step_f(fam), step_g(fam)
    left = bind(bind(computation(fam), f), g)
    right = bind(computation(fam), lambda a: bind(f(a), g))
    assert fam.run(s0, left) == fam.run(s0, right)


@pytest.mark.parametrize("fam", FAMILIES)
@pytest.mark.parametrize("s0", INITIAL_STATES)
@pytest.mark.parametrize("x", VALUES)
def test_lift_is_neutral(fam: Family, s0: int, x: int):
    f = step_g(fam)
    assert fam.run(s0, bind(lift(fam.cls, x), f)) == fam.run(s0, f(x))
    assert fam.run(s0, lift(fam.cls, x)) == fam.run(s0, fam.mod.pure(x))


@pytest.mark.parametrize(
    ("fam", "expected"),
    [
        (Family(StateResult, state_result, outcome), ("err", "too big: 20")),
        (Family(StateEither, state_either, _observe_either), (11, ("err", "too big: 20"))),
        (Family(Parser, parser, outcome), ("err", "too big: 20")),
    ],
    ids=["StateResult", "StateEither", "Parser"],
)
def test_failing_continuation_outcome(fam: Family, expected: typing.Any):
    observed = fam.run(10, bind(computation(fam), step_f(fam)))
    assert observed == expected
