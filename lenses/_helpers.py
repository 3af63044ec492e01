"""Internal helpers for lenses.

Small function builders shared by the optic and either modules."""

from __future__ import annotations

from collections.abc import Callable


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def const[T](value: T) -> Callable[[object], T]:
    """
    Build a function that ignores its argument and returns value.

    Usage:
        lens.over(const(0), box) == lens.set(0, box)
    """

    def run(_: object) -> T:
        return value

    return run


def take_new[B](value: B, _: object) -> B:
    """Replacer that discards the old whole: the identity lens's setter."""
    return value


__all__ = (
    "identity",
    "const",
    "take_new",
)
