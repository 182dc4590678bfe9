"""Internal helpers for statedo.

Common functions used across the container families. Not part of the public
API, but usable when building a custom container on the same pattern."""

from __future__ import annotations

from collections.abc import Callable

from ._errors import ContainerConsumedError
from ._logging import get_logger

log = get_logger(__name__)


class Once[S, R]:
    """
    Single-use guard around a deferred computation.

    The first call hands the wrapped function over and drops the reference;
    any later call raises ContainerConsumedError.
    """

    __slots__ = ("_fn", "_family")

    def __init__(self, fn: Callable[[S], R], family: str, /) -> None:
        self._fn: Callable[[S], R] | None = fn
        self._family = family

    @property
    def consumed(self) -> bool:
        return self._fn is None

    def __call__(self, state: S, /) -> R:
        fn = self._fn
        if fn is None:
            log.warning("container reused", family=self._family)
            raise ContainerConsumedError(self._family)
        self._fn = None
        return fn(state)


def expect[M](value: object, family: type[M], where: str) -> M:
    """Check that a continuation produced a container of ``family``."""
    if not isinstance(value, family):
        raise TypeError(
            f"{where} must produce {family.__name__}, got {type(value).__name__}"
        )
    return value


__all__ = (
    "Once",
    "expect",
)
