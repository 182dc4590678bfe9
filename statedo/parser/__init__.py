"""
Parser
======

Parser monad over the ``input -> Result[(remaining, value), E]`` combinator
convention, plus the primitive combinators that follow it.

    from statedo import parser as P

    P.run("hithere", P.tag("hi").then(lambda _: P.tag("the")))
"""

from . import primitives
from .primitives import ErrorKind, ParseError
from .monad import (
    Parser,
    get,
    gets,
    modify,
    pure,
    put,
    run,
    tag,
    take_while_m_n,
    throw,
    wrap,
)

__all__ = (
    "primitives",
    "ErrorKind",
    "ParseError",
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
