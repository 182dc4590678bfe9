"""Parser Monad

StateResult specialised to parser combinators. The state is the input still
to be consumed; on success a step yields ``Ok((remaining_input, value))``, on
failure ``Error(error)`` and the input position is dropped.

Any function following that convention becomes a Parser through ``wrap``;
a bare combinator cannot be bound directly."""

from __future__ import annotations

import typing
from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Result

from .._helpers import Once, expect
from .._logging import get_logger
from .._types import Combinator, Predicate
from . import primitives
from .primitives import ParseError

log = get_logger(__name__)


class Parser[S, A, E]:
    """Parser Monad.

    Wraps ``S -> Result[(S, A), E]`` where S is the input type. The error
    type is usually ParseError when built from ``primitives``.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value",)

    def __init__(self, value: Combinator[S, A, E], /) -> None:
        """Create Parser from a combinator function."""
        self._value = Once(value, "Parser")

    @staticmethod
    def pure[V, St](value: V) -> Parser[St, V, typing.Never]:
        """Lift a value without consuming input."""

        def parse(inp: St) -> Result[tuple[St, V], typing.Never]:
            return Ok((inp, value))

        return Parser(parse)

    # Functor operations

    def map[U](self, f: Callable[[A], U], /) -> Parser[S, U, E]:
        """Functor fmap - apply function to the parsed value."""

        def parse(inp: S) -> Result[tuple[S, U], E]:
            match self(inp):
                case Ok((rest, value)):
                    return Ok((rest, f(value)))
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return Parser(parse)

    def map_err[F](self, f: Callable[[E], F], /) -> Parser[S, A, F]:
        """Map over error type."""

        def parse(inp: S) -> Result[tuple[S, A], F]:
            return self(inp).map_err(f)

        return Parser(parse)

    # Monad operations

    def then[U](self, f: Callable[[A], Parser[S, U, E]], /) -> Parser[S, U, E]:
        """
        Monadic bind (>>=).

        - On Ok: runs the parser returned by f on the remaining input
        - On Error: short-circuit, f is never called
        """

        def parse(inp: S) -> Result[tuple[S, U], E]:
            match self(inp):
                case Ok((rest, value)):
                    return expect(f(value), Parser, "Parser.then continuation")(rest)
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return Parser(parse)

    # Protocol methods

    @property
    def consumed(self) -> bool:
        """True once the parser has been run."""
        return self._value.consumed

    def __call__(self, inp: S, /) -> Result[tuple[S, A], E]:
        """Execute the deferred parse."""
        return self._value(inp)

    def __repr__(self) -> str:
        return f"Parser(consumed={self.consumed})"


# Adapter
def wrap[S, A, E](combinator: Combinator[S, A, E], /) -> Parser[S, A, E]:
    """
    Lift an external combinator into Parser with no behavioral change.

    ``run(s, wrap(f))`` returns exactly what ``f(s)`` returns.
    """
    if not callable(combinator):
        raise TypeError(f"wrap() expects a combinator function, got {type(combinator).__name__}")
    return Parser(combinator)


# Constructors
def pure[S, A](value: A) -> Parser[S, A, typing.Never]:
    """Succeed with ``value`` without consuming input."""
    return Parser.pure(value)


def get[S]() -> Parser[S, S, typing.Never]:
    """Read the remaining input without consuming it."""

    def parse(inp: S) -> Result[tuple[S, S], typing.Never]:
        return Ok((inp, inp))

    return Parser(parse)


def gets[S, A](f: Callable[[S], A], /) -> Parser[S, A, typing.Never]:
    """Read a projection of the remaining input."""

    def parse(inp: S) -> Result[tuple[S, A], typing.Never]:
        return Ok((inp, f(inp)))

    return Parser(parse)


def put[S](new_input: S) -> Parser[typing.Any, None, typing.Never]:
    """Replace the remaining input."""

    def parse(_: typing.Any) -> Result[tuple[S, None], typing.Never]:
        return Ok((new_input, None))

    return Parser(parse)


def modify[S](f: Callable[[S], S], /) -> Parser[S, None, typing.Never]:
    """Replace the remaining input with ``f(input)``."""

    def parse(inp: S) -> Result[tuple[S, None], typing.Never]:
        return Ok((f(inp), None))

    return Parser(parse)


def throw[E](error: E) -> Parser[typing.Any, typing.Never, E]:
    """Fail with ``error`` whatever the input."""

    def parse(_: typing.Any) -> Result[tuple[typing.Any, typing.Never], E]:
        return Error(error)

    return Parser(parse)


def run[S, A, E](inp: S, ma: Parser[S, A, E]) -> Result[tuple[S, A], E]:
    """Run ``ma`` on ``inp``: ``Ok((remaining_input, value))`` or ``Error(e)``."""
    log.debug("run", family="Parser")
    return ma(inp)


# Pre-wrapped primitives
def tag(literal: str) -> Parser[str, str, ParseError]:
    """``wrap(primitives.tag(literal))``."""
    return wrap(primitives.tag(literal))


def take_while_m_n(m: int, n: int, predicate: Predicate[str]) -> Parser[str, str, ParseError]:
    """``wrap(primitives.take_while_m_n(m, n, predicate))``."""
    return wrap(primitives.take_while_m_n(m, n, predicate))


__all__ = (
    "Parser",
    "wrap",
    "pure",
    "get",
    "gets",
    "put",
    "modify",
    "throw",
    "run",
    "tag",
    "take_while_m_n",
)
