"""
StateResult
===========

State monad with a short-circuiting error channel that drops the state
on failure: ``S -> Result[(S, A), E]``.
"""

from .monad import StateResult, get, gets, modify, pure, put, run, throw

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
