"""
Primitive parser combinators
============================

Plain functions following the combinator convention the Parser container
adapts: ``input -> Ok((remaining_input, value)) | Error(ParseError)``.

They know nothing about Parser and can be called directly; wrap them with
``statedo.parser.wrap`` to use them in a bind chain.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import assert_never

from kungfu import Error, Ok, Result

from .._types import Combinator, Predicate


class ErrorKind(enum.Enum):
    """Which primitive rejected the input."""

    TAG = "tag"
    TAKE_WHILE_M_N = "take_while_m_n"
    MAP_RES = "map_res"


@dataclass(frozen=True, slots=True)
class ParseError:
    """Input remaining where parsing failed, and the primitive that failed."""

    input: str
    kind: ErrorKind

    def __str__(self) -> str:
        return f"{self.kind.value} failed at {self.input!r}"


def tag(literal: str) -> Combinator[str, str, ParseError]:
    """Match ``literal`` at the start of the input."""

    def parse(inp: str) -> Result[tuple[str, str], ParseError]:
        if inp.startswith(literal):
            return Ok((inp[len(literal):], literal))
        return Error(ParseError(inp, ErrorKind.TAG))

    return parse


def take_while_m_n(
    m: int,
    n: int,
    predicate: Predicate[str],
) -> Combinator[str, str, ParseError]:
    """Take between ``m`` and ``n`` leading characters satisfying ``predicate``."""
    if m < 0 or n < m:
        raise ValueError(f"take_while_m_n(): need 0 <= m <= n, got m={m}, n={n}")

    def parse(inp: str) -> Result[tuple[str, str], ParseError]:
        count = 0
        for ch in inp[:n]:
            if not predicate(ch):
                break
            count += 1
        if count < m:
            return Error(ParseError(inp, ErrorKind.TAKE_WHILE_M_N))
        return Ok((inp[count:], inp[:count]))

    return parse


def map_res[A, B](
    parser: Combinator[str, A, ParseError],
    f: Callable[[A], B],
) -> Combinator[str, B, ParseError]:
    """
    Apply ``f`` to the parsed value.

    If ``f`` raises ValueError the combinator fails at the original input.
    """

    def parse(inp: str) -> Result[tuple[str, B], ParseError]:
        match parser(inp):
            case Ok((rest, value)):
                try:
                    return Ok((rest, f(value)))
                except ValueError:
                    return Error(ParseError(inp, ErrorKind.MAP_RES))
            case Error(err):
                return Error(err)
            case _ as unreachable:
                assert_never(unreachable)

    return parse


def tuple_(
    *parsers: Combinator[str, typing.Any, ParseError],
) -> Combinator[str, tuple[typing.Any, ...], ParseError]:
    """Run ``parsers`` in order; the value is the tuple of their values."""

    def parse(inp: str) -> Result[tuple[str, tuple[typing.Any, ...]], ParseError]:
        rest = inp
        values: list[typing.Any] = []
        for parser in parsers:
            match parser(rest):
                case Ok((remaining, value)):
                    rest = remaining
                    values.append(value)
                case Error(err):
                    return Error(err)
        return Ok((rest, tuple(values)))

    return parse


__all__ = (
    "ErrorKind",
    "ParseError",
    "tag",
    "take_while_m_n",
    "map_res",
    "tuple_",
)
