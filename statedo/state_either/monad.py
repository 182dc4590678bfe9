"""StateEither Monad

Combined monad unifying:
- Lazy (nothing runs until ``run``)
- State[S] (a value threaded from step to step)
- Result[T, E] (success/error)

Unlike StateResult, the state survives a failure: run with ``s`` a container
produces ``StateEitherResult(new_state, Ok(value) | Error(error))`` where
``new_state`` is the state as of the failing step."""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._helpers import Once, expect
from .._logging import get_logger
from .result import StateEitherResult

log = get_logger(__name__)


class StateEither[S, A, E]:
    """State Either Monad.

    Wraps ``S -> StateEitherResult[S, A, E]``.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value",)

    def __init__(self, value: Callable[[S], StateEitherResult[S, A, E]], /) -> None:
        """Create StateEither from a fn taking the state."""
        self._value = Once(value, "StateEither")

    @staticmethod
    def pure[V, St](value: V) -> StateEither[St, V, typing.Never]:
        """Lift a value into the monad, leaving the state untouched."""

        def run(state: St) -> StateEitherResult[St, V, typing.Never]:
            return StateEitherResult(state, Ok(value))

        return StateEither(run)

    @staticmethod
    def from_result[V, Err, St](result: Result[V, Err]) -> StateEither[St, V, Err]:
        """Lift an already computed Result, keeping the state either way."""

        def run(state: St) -> StateEitherResult[St, V, Err]:
            return StateEitherResult(state, result)

        return StateEither(run)

    # Functor operations

    def map[U](self, f: Callable[[A], U], /) -> StateEither[S, U, E]:
        """Functor fmap - apply function to success value, keep the state."""

        def run(state: S) -> StateEitherResult[S, U, E]:
            ser = self(state)
            return StateEitherResult(ser.state, ser.result.map(f))

        return StateEither(run)

    def map_err[F](self, f: Callable[[E], F], /) -> StateEither[S, A, F]:
        """Map over error type."""

        def run(state: S) -> StateEitherResult[S, A, F]:
            ser = self(state)
            return StateEitherResult(ser.state, ser.result.map_err(f))

        return StateEither(run)

    # Monad operations

    def then[U](
        self,
        f: Callable[[A], StateEither[S, U, E]],
        /,
    ) -> StateEither[S, U, E]:
        """
        Monadic bind (>>=).

        - On Ok: runs the container returned by f with the new state
        - On Error: short-circuit, f is never called, the state is kept
        """

        def run(state: S) -> StateEitherResult[S, U, E]:
            ser = self(state)
            match ser.result:
                case Ok(value):
                    next_m = expect(f(value), StateEither, "StateEither.then continuation")
                    return next_m(ser.state)
                case Error(err):
                    return StateEitherResult(ser.state, Error(err))
                case _ as unreachable:
                    assert_never(unreachable)

        return StateEither(run)

    # Protocol methods

    @property
    def consumed(self) -> bool:
        """True once the container has been run."""
        return self._value.consumed

    def __call__(self, state: S, /) -> StateEitherResult[S, A, E]:
        """Execute the deferred computation."""
        return self._value(state)

    def __repr__(self) -> str:
        return f"StateEither(consumed={self.consumed})"


# Constructors
def pure[S, A](value: A) -> StateEither[S, A, typing.Never]:
    """Lift ``value``; never fails, state unchanged."""
    return StateEither.pure(value)


def get[S]() -> StateEither[S, S, typing.Never]:
    """Read the current state."""

    def run(state: S) -> StateEitherResult[S, S, typing.Never]:
        return StateEitherResult(state, Ok(state))

    return StateEither(run)


def gets[S, A](f: Callable[[S], A], /) -> StateEither[S, A, typing.Never]:
    """Read a projection of the current state."""

    def run(state: S) -> StateEitherResult[S, A, typing.Never]:
        return StateEitherResult(state, Ok(f(state)))

    return StateEither(run)


def put[S](new_state: S) -> StateEither[typing.Any, None, typing.Never]:
    """Replace the state. The new state may be of a different type."""

    def run(_: typing.Any) -> StateEitherResult[S, None, typing.Never]:
        return StateEitherResult(new_state, Ok(None))

    return StateEither(run)


def modify[S](f: Callable[[S], S], /) -> StateEither[S, None, typing.Never]:
    """Replace the state with ``f(state)``."""

    def run(state: S) -> StateEitherResult[S, None, typing.Never]:
        return StateEitherResult(f(state), Ok(None))

    return StateEither(run)


def throw[S, E](error: E) -> StateEither[S, typing.Never, E]:
    """Fail with ``error``; the incoming state is reported with it."""

    def run(state: S) -> StateEitherResult[S, typing.Never, E]:
        return StateEitherResult(state, Error(error))

    return StateEither(run)


def run[S, A, E](initial_state: S, ma: StateEither[S, A, E]) -> StateEitherResult[S, A, E]:
    """Run ``ma`` from ``initial_state``; the final state is always reported."""
    log.debug("run", family="StateEither")
    return ma(initial_state)


__all__ = (
    "StateEither",
    "pure",
    "get",
    "gets",
    "put",
    "modify",
    "throw",
    "run",
)
