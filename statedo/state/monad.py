"""State Monad

Deferred state transition that never fails:
- Lazy (nothing runs until ``run``)
- State[S] (a value threaded from step to step)

Run with state ``s`` a container produces ``(value, new_state)``."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._helpers import Once, expect
from .._logging import get_logger
from .._types import StateFn

log = get_logger(__name__)


class State[S, A]:
    """State Monad.

    Wraps ``S -> (A, S)``. Single-use: running it hands the wrapped
    computation over, a second run raises ContainerConsumedError.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value",)

    def __init__(self, value: StateFn[S, A], /) -> None:
        """Create State from a fn taking the state."""
        self._value = Once(value, "State")

    @staticmethod
    def pure[V, St](value: V) -> State[St, V]:
        """Lift a value into the monad, leaving the state untouched."""

        def run(state: St) -> tuple[V, St]:
            return value, state

        return State(run)

    # Functor operations

    def map[U](self, f: Callable[[A], U], /) -> State[S, U]:
        """Functor fmap - apply function to the value, keep the state."""

        def run(state: S) -> tuple[U, S]:
            value, new_state = self(state)
            return f(value), new_state

        return State(run)

    # Monad operations

    def then[U](self, f: Callable[[A], State[S, U]], /) -> State[S, U]:
        """
        Monadic bind (>>=).

        Runs self, feeds the value to ``f`` and runs the container it
        returns with the new state.
        """

        def run(state: S) -> tuple[U, S]:
            value, new_state = self(state)
            return expect(f(value), State, "State.then continuation")(new_state)

        return State(run)

    # Protocol methods

    @property
    def consumed(self) -> bool:
        """True once the container has been run."""
        return self._value.consumed

    def __call__(self, state: S, /) -> tuple[A, S]:
        """Execute the deferred computation."""
        return self._value(state)

    def __repr__(self) -> str:
        return f"State(consumed={self.consumed})"


# Constructors
def pure[S, A](value: A) -> State[S, A]:
    """Lift ``value``; the state passes through unchanged."""
    return State.pure(value)


def get[S]() -> State[S, S]:
    """Read the current state: run with ``s`` gives ``(s, s)``."""

    def run(state: S) -> tuple[S, S]:
        return state, state

    return State(run)


def gets[S, A](f: Callable[[S], A], /) -> State[S, A]:
    """Read a projection of the current state."""

    def run(state: S) -> tuple[A, S]:
        return f(state), state

    return State(run)


def put[S](new_state: S) -> State[typing.Any, None]:
    """Replace the state. The new state may be of a different type."""

    def run(_: typing.Any) -> tuple[None, S]:
        return None, new_state

    return State(run)


def modify[S](f: Callable[[S], S], /) -> State[S, None]:
    """Replace the state with ``f(state)``."""

    def run(state: S) -> tuple[None, S]:
        return None, f(state)

    return State(run)


def run[S, A](initial_state: S, ma: State[S, A]) -> tuple[A, S]:
    """Run ``ma`` from ``initial_state``, returning ``(value, final_state)``."""
    log.debug("run", family="State")
    return ma(initial_state)


__all__ = (
    "State",
    "pure",
    "get",
    "gets",
    "put",
    "modify",
    "run",
)
