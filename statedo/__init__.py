"""
statedo - state monads with do-notation for Python.

Deferred, single-use computations that thread a state value through a
chain of steps, written linearly with ``do`` instead of nested callbacks.

Architecture:
- state        - State[S, A]: S -> (A, S), never fails
- state_result - StateResult[S, A, E]: S -> Result[(S, A), E], state dropped on failure
- state_either - StateEither[S, A, E]: S -> (S, Result[A, E]), state kept on failure
- parser       - Parser[S, A, E]: adapter over input -> Result[(rest, A), E] combinators
- do           - then/pure protocol, bind/lift/seq and the @do decorator

Each family module exposes the same constructors (pure, get, gets, put,
modify, throw where failure exists) and a run(initial_state, container).
"""

# Core types
from ._types import Combinator, NoError, Predicate, StateFn, StateResultFn, Unit

# Internal helpers (for custom containers)
from . import _helpers

# Container families (namespace import - preferred)
from . import parser, state, state_either, state_result

# Containers
from .parser import ErrorKind, ParseError, Parser
from .state import State
from .state_either import StateEither, StateEitherResult
from .state_result import StateResult

# Sequencing protocol
from .do import Monad, bind, do, lift, seq

# Logging
from ._logging import configure_logging

# Errors
from ._errors import ContainerConsumedError

__all__ = (
    # Types
    "Combinator",
    "NoError",
    "Predicate",
    "StateFn",
    "StateResultFn",
    "Unit",
    # Internal helpers (for custom containers)
    "_helpers",
    # Families
    "parser",
    "state",
    "state_either",
    "state_result",
    # Containers
    "ErrorKind",
    "ParseError",
    "Parser",
    "State",
    "StateEither",
    "StateEitherResult",
    "StateResult",
    # Sequencing
    "Monad",
    "bind",
    "do",
    "lift",
    "seq",
    # Logging
    "configure_logging",
    # Errors
    "ContainerConsumedError",
)
