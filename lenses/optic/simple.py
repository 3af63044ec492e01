"""
SimpleLens - lens that never changes types
==========================================
"""

from __future__ import annotations

from .._types import Accessor, Replacer
from .lens import Lens


class SimpleLens[T, F](Lens[T, T, F, F]):
    """
    Lens[T, T, F, F] spelled with two type parameters.

    Use when updates keep the whole's type and the part's type. Anything
    accepting a Lens accepts a SimpleLens.
    """

    __slots__ = ()

    def __init__(self, accessor: Accessor[T, F], replacer: Replacer[F, T, T], /) -> None:
        super().__init__(accessor, replacer)

    def and_then_simple[G](self, next: SimpleLens[F, G], /) -> SimpleLens[T, G]:
        """Like and_then(), but the result stays a SimpleLens."""

        def accessor(t: T) -> G:
            return next.view(self.view(t))

        def replacer(g: G, t: T) -> T:
            return self.set(next.set(g, self.view(t)), t)

        return SimpleLens(accessor, replacer)


__all__ = ("SimpleLens",)
