"""
Lens - composable view into an immutable whole
==============================================
"""

from __future__ import annotations

from .._types import Accessor, Mapper, Replacer


class Lens[S, T, A, B]:
    """
    Accessor and replacer pair focused on one part of a whole.

    Type parameters:
    - S: the whole being viewed
    - T: the whole produced by an update (may differ from S)
    - A: the part being viewed
    - B: the part written back (may differ from A)

    The lens is only well behaved when the caller's functions obey:
    - accessor is pure
    - replacer never modifies the whole it is given
    - GetPut: set(view(s), s) == s
    - PutGet: view(set(b, s)) == b
    - PutPut: set(b2, set(b1, s)) == set(b2, s)

    None of these are checked at runtime.
    """

    __slots__ = ("_accessor", "_replacer")

    def __init__(self, accessor: Accessor[S, A], replacer: Replacer[B, S, T], /) -> None:
        self._accessor = accessor
        self._replacer = replacer

    @property
    def accessor(self) -> Accessor[S, A]:
        """Function extracting the part from a whole."""
        return self._accessor

    @property
    def replacer(self) -> Replacer[B, S, T]:
        """Function building a new whole around a new part."""
        return self._replacer

    def view(self, instance: S, /) -> A:
        """Read the focused part of instance."""
        return self._accessor(instance)

    def over(self, mapper: Mapper[A, B], instance: S, /) -> T:
        """
        Build a new whole with the focused part passed through mapper.

        Example:
            first = Lens(lambda p: p[0], lambda v, p: (v, p[1]))
            first.over(lambda i: i + 5, (5, 10))  # (10, 10)
        """
        return self._replacer(mapper(self.view(instance)), instance)

    def set(self, value: B, instance: S, /) -> T:
        """
        Build a new whole with the focused part replaced by value.

        NOTE: Does not read the current part; the accessor is never called.
        """
        return self._replacer(value, instance)

    def and_then[C, D](self, next: Lens[A, B, C, D], /) -> Lens[S, T, C, D]:
        """
        Compose with a lens focused inside this lens's part.

        Viewing drills outer to inner; setting rebuilds inner to outer.

        Example:
            inner_of = Lens(lambda o: o.inner, lambda i, o: Outer(i))
            content2 = Lens(lambda b: b.content2, lambda c, b: Box(b.content1, c))
            inner_of.and_then(content2).set(99, outer)
        """

        def accessor(s: S) -> C:
            return next.view(self.view(s))

        def replacer(d: D, s: S) -> T:
            return self.set(next.set(d, self.view(s)), s)

        return Lens(accessor, replacer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._accessor!r}, {self._replacer!r})"


__all__ = ("Lens",)
