"""
Core type definitions for statedo.

Aliases for the deferred computations wrapped by each container family.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Unit = value produced by steps that only change state (put, modify)
type Unit = None

# NoError = type representing "never fails" semantic
type NoError = typing.Never

# ============================================================================
# Deferred computations (raw form of each container)
# ============================================================================

# State: S -> (A, S)
type StateFn[S, A] = Callable[[S], tuple[A, S]]

# StateResult / Parser: S -> Ok((S, A)) | Error(E)
type StateResultFn[S, A, E] = Callable[[S], Result[tuple[S, A], E]]

# External combinator convention: remaining input first, then parsed value
type Combinator[S, A, E] = Callable[[S], Result[tuple[S, A], E]]

__all__ = (
    # Type aliases
    "Predicate",
    "Unit",
    "NoError",
    # Deferred computations
    "StateFn",
    "StateResultFn",
    "Combinator",
)
