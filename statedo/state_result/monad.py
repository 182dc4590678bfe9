"""StateResult Monad

Combined monad unifying:
- Lazy (nothing runs until ``run``)
- State[S] (a value threaded from step to step)
- Result[T, E] (success/error)

The first failure aborts the chain and the state at that point is dropped:
run with ``s`` a container produces ``Ok((new_state, value))`` or
``Error(error)``."""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._helpers import Once, expect
from .._logging import get_logger
from .._types import StateResultFn

log = get_logger(__name__)


class StateResult[S, A, E]:
    """State Result Monad.

    Wraps ``S -> Result[(S, A), E]``.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value",)

    def __init__(self, value: StateResultFn[S, A, E], /) -> None:
        """Create StateResult from a fn taking the state."""
        self._value = Once(value, "StateResult")

    @staticmethod
    def pure[V, St](value: V) -> StateResult[St, V, typing.Never]:
        """Lift a value into the monad, leaving the state untouched."""

        def run(state: St) -> Result[tuple[St, V], typing.Never]:
            return Ok((state, value))

        return StateResult(run)

    @staticmethod
    def from_result[V, Err, St](result: Result[V, Err]) -> StateResult[St, V, Err]:
        """Lift an already computed Result; the state passes through on Ok."""

        def run(state: St) -> Result[tuple[St, V], Err]:
            match result:
                case Ok(value):
                    return Ok((state, value))
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return StateResult(run)

    # Functor operations

    def map[U](self, f: Callable[[A], U], /) -> StateResult[S, U, E]:
        """Functor fmap - apply function to success value, keep the state."""

        def run(state: S) -> Result[tuple[S, U], E]:
            match self(state):
                case Ok((new_state, value)):
                    return Ok((new_state, f(value)))
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return StateResult(run)

    def map_err[F](self, f: Callable[[E], F], /) -> StateResult[S, A, F]:
        """Map over error type."""

        def run(state: S) -> Result[tuple[S, A], F]:
            return self(state).map_err(f)

        return StateResult(run)

    # Monad operations

    def then[U](
        self,
        f: Callable[[A], StateResult[S, U, E]],
        /,
    ) -> StateResult[S, U, E]:
        """
        Monadic bind (>>=).

        - On Ok: runs the container returned by f with the new state
        - On Error: short-circuit, f is never called and the state is lost
        """

        def run(state: S) -> Result[tuple[S, U], E]:
            match self(state):
                case Ok((new_state, value)):
                    next_m = expect(f(value), StateResult, "StateResult.then continuation")
                    return next_m(new_state)
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return StateResult(run)

    # Protocol methods

    @property
    def consumed(self) -> bool:
        """True once the container has been run."""
        return self._value.consumed

    def __call__(self, state: S, /) -> Result[tuple[S, A], E]:
        """Execute the deferred computation."""
        return self._value(state)

    def __repr__(self) -> str:
        return f"StateResult(consumed={self.consumed})"


# Constructors
def pure[S, A](value: A) -> StateResult[S, A, typing.Never]:
    """Lift ``value``; never fails, state unchanged."""
    return StateResult.pure(value)


def get[S]() -> StateResult[S, S, typing.Never]:
    """Read the current state: run with ``s`` gives ``Ok((s, s))``."""

    def run(state: S) -> Result[tuple[S, S], typing.Never]:
        return Ok((state, state))

    return StateResult(run)


def gets[S, A](f: Callable[[S], A], /) -> StateResult[S, A, typing.Never]:
    """Read a projection of the current state."""

    def run(state: S) -> Result[tuple[S, A], typing.Never]:
        return Ok((state, f(state)))

    return StateResult(run)


def put[S](new_state: S) -> StateResult[typing.Any, None, typing.Never]:
    """Replace the state. The new state may be of a different type."""

    def run(_: typing.Any) -> Result[tuple[S, None], typing.Never]:
        return Ok((new_state, None))

    return StateResult(run)


def modify[S](f: Callable[[S], S], /) -> StateResult[S, None, typing.Never]:
    """Replace the state with ``f(state)``."""

    def run(state: S) -> Result[tuple[S, None], typing.Never]:
        return Ok((f(state), None))

    return StateResult(run)


def throw[E](error: E) -> StateResult[typing.Any, typing.Never, E]:
    """Fail with ``error`` whatever the incoming state; the state is dropped."""

    def run(_: typing.Any) -> Result[tuple[typing.Any, typing.Never], E]:
        return Error(error)

    return StateResult(run)


def run[S, A, E](initial_state: S, ma: StateResult[S, A, E]) -> Result[tuple[S, A], E]:
    """Run ``ma`` from ``initial_state``: ``Ok((final_state, value))`` or ``Error(e)``."""
    log.debug("run", family="StateResult")
    return ma(initial_state)


__all__ = (
    "StateResult",
    "pure",
    "get",
    "gets",
    "put",
    "modify",
    "throw",
    "run",
)
