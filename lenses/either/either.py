"""
Either - Left (failure) or Right (success)
==========================================

Closed two-variant sum type. Continuation methods short-circuit on Left.
"""

from __future__ import annotations

import logging
import typing
from abc import ABC, abstractmethod

from .._errors import VariantMismatchError
from .._types import Mapper, Thunk

logger = logging.getLogger(__name__)


class Either[L, R](ABC):
    """
    Result of a computation that can fail.

    Conventionally Left carries error information and Right carries the
    successful result. Exactly two variants exist: Left and Right.

    Laws:
    - Functor identity: e.map(identity) == e
    - Right identity: e.flat_map(pure) == e
    - Left identity: pure(x).flat_map(f) == f(x)
    - Left is absorbing: any map/flat_map chain on Left(x) yields Left(x)
    """

    __slots__ = ("_item",)
    __match_args__ = ("item",)

    _item: typing.Any

    def __init_subclass__(cls, **kwargs: typing.Any) -> None:
        super().__init_subclass__(**kwargs)
        # Closed union: only Left and Right, declared below.
        if cls.__module__ != __name__ or cls.__qualname__ not in ("Left", "Right"):
            raise TypeError(
                f"Either has exactly two variants, Left and Right; cannot define {cls.__qualname__}"
            )

    @property
    def item(self) -> L | R:
        """The payload, whichever side it is on."""
        return self._item

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def to_left[LL, RR](item: LL) -> Left[LL, RR]:
        """Put item into a Left."""
        return Left(item)

    @staticmethod
    def to_right[LL, RR](item: RR) -> Right[LL, RR]:
        """Put item into a Right."""
        return Right(item)

    @staticmethod
    def pure[LL, RR](item: RR) -> Right[LL, RR]:
        """Alias of to_right(): wrapping a plain value is a success."""
        return Right(item)

    # ------------------------------------------------------------------
    # Queries and unwrapping
    # ------------------------------------------------------------------

    @abstractmethod
    def is_left(self) -> bool: ...

    @abstractmethod
    def is_right(self) -> bool: ...

    @abstractmethod
    def from_left(self) -> L:
        """Unsafely extract a Left's item. Raises VariantMismatchError on Right."""

    @abstractmethod
    def from_right(self) -> R:
        """Unsafely extract a Right's item. Raises VariantMismatchError on Left."""

    @abstractmethod
    def left(self) -> L | None:
        """Left's item, or None on Right. Never raises."""

    @abstractmethod
    def right(self) -> R | None:
        """Right's item, or None on Left. Never raises."""

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    @abstractmethod
    def or_(self, other: Either[L, R], /) -> Either[L, R]:
        """
        Alternative: keep self if Right, otherwise take other.

        other is evaluated by the caller before the call. Use lazy_or()
        when building the alternative is costly or has side effects.

        Example:
            to_left("a").or_(to_right(1))  # Right(1)
            to_left("a").or_(to_left("b"))  # Left("b")
        """

    @abstractmethod
    def lazy_or(self, other: Thunk[Either[L, R]], /) -> Either[L, R]:
        """Like or_(), but other is only called when self is Left."""

    @abstractmethod
    def map[S](self, mapper: Mapper[R, S], /) -> Either[L, S]:
        """Apply mapper to a Right's item. Left passes through untouched."""

    @abstractmethod
    def flat_map[S](self, mapper: Mapper[R, Either[L, S]], /) -> Either[L, S]:
        """
        Sequence an Either-producing step after this one.

        Returns mapper's result as-is on Right; Left short-circuits.

        Example:
            parse(raw).flat_map(validate).flat_map(save)
        """

    @abstractmethod
    def fold[X](self, on_left: Mapper[L, X], on_right: Mapper[R, X], /) -> X:
        """Collapse into a plain value by handling both variants."""

    def __or__(self, other: Either[L, R], /) -> Either[L, R]:
        """a | b is a.or_(b)."""
        return self.or_(other)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._item == typing.cast(Either[typing.Any, typing.Any], other)._item)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._item))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._item!r})"


@typing.final
class Left[L, R](Either[L, R]):
    """Failure variant. R is only a phantom type here."""

    __slots__ = ()

    def __init__(self, item: L, /) -> None:
        self._item = item

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def from_left(self) -> L:
        return self._item

    def from_right(self) -> R:
        logger.debug("from_right() called on %r", self)
        raise VariantMismatchError(expected="Right", actual="Left")

    def left(self) -> L | None:
        return self._item

    def right(self) -> R | None:
        return None

    def or_(self, other: Either[L, R], /) -> Either[L, R]:
        return other

    def lazy_or(self, other: Thunk[Either[L, R]], /) -> Either[L, R]:
        return other()

    def map[S](self, mapper: Mapper[R, S], /) -> Either[L, S]:
        return Left(self._item)

    def flat_map[S](self, mapper: Mapper[R, Either[L, S]], /) -> Either[L, S]:
        return Left(self._item)

    def fold[X](self, on_left: Mapper[L, X], on_right: Mapper[R, X], /) -> X:
        return on_left(self._item)


@typing.final
class Right[L, R](Either[L, R]):
    """Success variant. L is only a phantom type here."""

    __slots__ = ()

    def __init__(self, item: R, /) -> None:
        self._item = item

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def from_left(self) -> L:
        logger.debug("from_left() called on %r", self)
        raise VariantMismatchError(expected="Left", actual="Right")

    def from_right(self) -> R:
        return self._item

    def left(self) -> L | None:
        return None

    def right(self) -> R | None:
        return self._item

    def or_(self, other: Either[L, R], /) -> Either[L, R]:
        return self

    def lazy_or(self, other: Thunk[Either[L, R]], /) -> Either[L, R]:
        return self

    def map[S](self, mapper: Mapper[R, S], /) -> Either[L, S]:
        return Right(mapper(self._item))

    def flat_map[S](self, mapper: Mapper[R, Either[L, S]], /) -> Either[L, S]:
        return mapper(self._item)

    def fold[X](self, on_left: Mapper[L, X], on_right: Mapper[R, X], /) -> X:
        return on_right(self._item)


# ============================================================================
# Module-level constructors
# ============================================================================


def to_left[L, R](item: L) -> Left[L, R]:
    """Put item into a Left."""
    return Left(item)


def to_right[L, R](item: R) -> Right[L, R]:
    """Put item into a Right."""
    return Right(item)


def pure[L, R](item: R) -> Right[L, R]:
    """
    Lift a plain value into a successful Either.

    Classic FP name for to_right().
    """
    return Right(item)


__all__ = (
    "Either",
    "Left",
    "Right",
    "to_left",
    "to_right",
    "pure",
)
