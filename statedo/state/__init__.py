"""
State
=====

Never-failing state monad: ``S -> (A, S)``.
"""

from .monad import State, get, gets, modify, pure, put, run

__all__ = (
    "State",
    "pure",
    "get",
    "gets",
    "put",
    "modify",
    "run",
)
