"""StateResult drops the state when a step fails."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from kungfu import Error, Ok

from statedo import ContainerConsumedError, StateResult, do, state_result
from tests.helpers.results import err_value, ok_value


@do(StateResult)
def bump_and_check(limit: int):
    st = yield state_result.get()
    yield state_result.put(st + 1)
    st = yield state_result.get()
    yield state_result.put(st + 1)
    st = yield state_result.get()
    if st > limit:
        yield state_result.throw("Oh no!")
    return state_result.get()


def test_failure_returns_only_the_error():
    result = state_result.run(10, bump_and_check(11))
    assert err_value(result) == "Oh no!"


def test_success_returns_state_and_value():
    result = state_result.run(10, bump_and_check(12))
    assert ok_value(result) == (12, 12)


def test_throw_ignores_incoming_state():
    result = state_result.run("anything", state_result.throw(ValueError("bad")))
    err = err_value(result)
    assert isinstance(err, ValueError)
    assert str(err) == "bad"


def test_continuation_not_called_after_failure(calls: list[str], record: Callable[[str], None]):
    def after(_: object) -> StateResult[int, None, str]:
        record("after")
        return state_result.put(0)

    ma = state_result.throw("stop").then(after)

    assert err_value(state_result.run(1, ma)) == "stop"
    assert calls == []


def test_put_get_sequence():
    ma = state_result.put(5).then(lambda _: state_result.get())
    assert ok_value(state_result.run(0, ma)) == (5, 5)


def test_from_result():
    assert ok_value(state_result.run("s", StateResult.from_result(Ok(1)))) == ("s", 1)
    assert err_value(state_result.run("s", StateResult.from_result(Error("e")))) == "e"


def test_map_and_map_err():
    ok = state_result.gets(lambda s: s + 1).map(lambda v: v * 10)
    assert ok_value(state_result.run(1, ok)) == (1, 20)

    failed = state_result.throw("e").map_err(str.upper)
    assert err_value(state_result.run(1, failed)) == "E"


def test_modify():
    ma = state_result.modify(lambda s: s + [1]).then(lambda _: state_result.get())
    assert ok_value(state_result.run([], ma)) == ([1], [1])


def test_run_twice_raises():
    ma = state_result.pure(1)
    state_result.run(0, ma)

    with pytest.raises(ContainerConsumedError) as exc_info:
        state_result.run(0, ma)
    assert exc_info.value.family == "StateResult"
