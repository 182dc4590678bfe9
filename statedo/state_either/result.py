"""
StateEitherResult - Result paired with the final state
======================================================
"""

from __future__ import annotations

import typing
from collections.abc import Iterator

from kungfu import Result


class StateEitherResult[S, A, E]:
    """
    Result paired with the state it was reached in.

    Combines:
    - S: the state as of success, or as of the failing step
    - Result[A, E]: computation result (success or error)

    This is the "unwrapped" form of StateEither. Unpacks like a pair:
        state, result = run(s0, computation)
    """

    __slots__ = ("_state", "_result")
    __match_args__ = ("_state", "_result")

    def __init__(self, state: S, result: Result[A, E]) -> None:
        self._state = state
        self._result = result

    @property
    def state(self) -> S:
        """The state when the computation stopped."""
        return self._state

    @property
    def result(self) -> Result[A, E]:
        """The underlying Result."""
        return self._result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StateEitherResult):
            return NotImplemented
        return (self._state, self._result) == (other._state, other._result)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[typing.Any]:
        yield self._state
        yield self._result

    def __repr__(self) -> str:
        return f"StateEitherResult({self._state!r}, {self._result!r})"


__all__ = ("StateEitherResult",)
