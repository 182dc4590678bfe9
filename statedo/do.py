"""
Sequencing protocol and do-notation.

Architecture:
- Monad - protocol every container family satisfies (then + pure)
- bind / lift - free-function spelling of then / pure
- seq - run containers in order, keep the last value
- do - generator-based notation desugared into nested then calls

Example:
    from statedo import do, state

    @do(state.State)
    def bump():
        st = yield state.get()
        yield state.put(st + 1)
        st = yield state.get()
        yield state.put(st + 1)
        return state.get()

    state.run(10, bump())  # (12, 12)

``yield m`` binds ``m`` and sends its value back into the body. The body's
``return`` is the final expression: a container of the family runs in tail
position, any other value is lifted with ``family.pure``. Returning a container
of another family (or, under Parser, an unwrapped combinator) raises TypeError.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable, Generator
from functools import wraps
from typing import ParamSpec

from ._helpers import expect
from ._logging import get_logger
from .parser import Parser

P = ParamSpec("P")

log = get_logger(__name__)


# ============================================================================
# Protocol
# ============================================================================


@typing.runtime_checkable
class Monad[A](typing.Protocol):
    """
    Contract for containers usable with bind/lift/do.

    - then: (M[A], A -> M[B]) -> M[B], never runs anything itself
    - pure: A -> M[A], no effect on state, never fails
    """

    def then(self, f: Callable[[A], typing.Any], /) -> typing.Any: ...

    @staticmethod
    def pure(value: typing.Any) -> typing.Any: ...


# ============================================================================
# Free functions
# ============================================================================


def bind[M: Monad[typing.Any]](m: M, f: Callable[[typing.Any], M], /) -> M:
    """Sequence ``m`` into ``f``: same as ``m.then(f)``."""
    return m.then(f)


def lift[M: Monad[typing.Any]](family: type[M], value: typing.Any, /) -> M:
    """
    Wrap ``value`` in the given family: same as ``family.pure(value)``.

    The family is named explicitly; it cannot be inferred from the
    expected return type.
    """
    return family.pure(value)


def seq[M: Monad[typing.Any]](first: M, /, *rest: M) -> M:
    """
    Run containers left to right, keeping only the last value.

    Statement form of do-notation: ``seq(a, b, c)`` is ``a; b; c``.
    """
    m = first
    for nxt in rest:
        m = m.then(lambda _, nxt=nxt: nxt)
    return m


# ============================================================================
# Do-notation
# ============================================================================


type DoBody[**Q] = Callable[Q, Generator[typing.Any, typing.Any, typing.Any]]


def _step[M](
    family: type[M],
    body: Generator[typing.Any, typing.Any, typing.Any],
    sent: typing.Any,
    name: str,
) -> M:
    try:
        yielded = body.send(sent)
    except StopIteration as stop:
        log.debug("do body finished", body=name, family=family.__name__)
        value = stop.value
        if isinstance(value, Monad) or (issubclass(family, Parser) and callable(value)):
            return expect(value, family, f"return in {name}")
        return family.pure(value)  # type: ignore[attr-defined]

    if not isinstance(yielded, family):
        body.close()
    m = expect(yielded, family, f"yield in {name}")
    return m.then(lambda value: _step(family, body, value, name))  # type: ignore[attr-defined]


def do[M](family: type[M]) -> Callable[[DoBody[P]], Callable[P, M]]:
    """
    Turn a generator function into a function returning a ``family`` container.

    The body only starts when the container is run, so each call of the
    decorated function gives a fresh single-use container.

    Every ``yield`` nests a few call frames when the container runs, so a body
    looping over more than about 200 yields exceeds the default recursion
    limit (``sys.getrecursionlimit()``, 1000). Split long loops into smaller
    do functions or raise the limit.
    """

    def decorator(fn: DoBody[P]) -> Callable[P, M]:
        if not inspect.isgeneratorfunction(fn):
            raise TypeError(f"do({family.__name__}) expects a generator function, got {fn!r}")
        name = fn.__qualname__

        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> M:
            def start(_: None) -> M:
                return _step(family, fn(*args, **kwargs), None, name)

            return family.pure(None).then(start)  # type: ignore[attr-defined]

        return wrapper

    return decorator


__all__ = (
    "Monad",
    "bind",
    "lift",
    "seq",
    "do",
)
