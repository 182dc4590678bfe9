from __future__ import annotations

class ContainerConsumedError(RuntimeError):
    """A single-use container was run a second time."""

    family: str

    def __init__(self, family: str) -> None:
        self.family = family
        super().__init__(f"{family} computation was already run; containers are single-use")

__all__ = ("ContainerConsumedError",)
