"""
Composition helpers
===================

Identity lens and n-ary composition built from and_then / and_then_simple.
"""

from __future__ import annotations

import typing
from functools import reduce

from .._helpers import identity, take_new
from .lens import Lens
from .simple import SimpleLens


def identity_lens[T]() -> SimpleLens[T, T]:
    """
    Lens focused on the whole itself.

    Unit of composition: identity_lens().and_then(l) and l.and_then(identity_lens())
    behave exactly like l.
    """
    return SimpleLens(identity, take_new)


def compose(
    *lenses: Lens[typing.Any, typing.Any, typing.Any, typing.Any],
) -> Lens[typing.Any, typing.Any, typing.Any, typing.Any]:
    """
    Chain lenses outer to inner.

    compose(a, b, c) is a.and_then(b).and_then(c).

    NOTE: Intermediate types can't be expressed for arbitrary arity,
          so the result is typed with Any. Use and_then() for precise types.
    """
    if not lenses:
        raise ValueError("compose() requires at least one lens")
    first, *rest = lenses
    return reduce(lambda acc, nxt: acc.and_then(nxt), rest, first)


def compose_simple(
    *lenses: SimpleLens[typing.Any, typing.Any],
) -> SimpleLens[typing.Any, typing.Any]:
    """
    Chain simple lenses outer to inner, keeping the SimpleLens form.

    Every argument must be a SimpleLens; use compose() to mix in general lenses.

    Raises:
        ValueError: no lens given
        TypeError: an argument is not a SimpleLens
    """
    if not lenses:
        raise ValueError("compose_simple() requires at least one lens")
    for position, lens in enumerate(lenses):
        if not isinstance(lens, SimpleLens):
            raise TypeError(
                f"compose_simple() argument {position} must be SimpleLens, "
                f"got {type(lens).__name__}; use compose() for general lenses"
            )
    first, *rest = lenses
    return reduce(lambda acc, nxt: acc.and_then_simple(nxt), rest, first)


__all__ = (
    "identity_lens",
    "compose",
    "compose_simple",
)
