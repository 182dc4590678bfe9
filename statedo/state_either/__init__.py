"""
StateEither
===========

State monad with a short-circuiting error channel that keeps the state
on failure: ``S -> (S, Result[A, E])``.
"""

from .result import StateEitherResult
from .monad import StateEither, get, gets, modify, pure, put, run, throw

__all__ = (
    "StateEither",
    "StateEitherResult",
    "pure",
    "get",
    "gets",
    "put",
    "modify",
    "throw",
    "run",
)
