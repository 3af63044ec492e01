"""
Bridges between Either and kungfu.

Right corresponds to Ok, Left to Error. The payload is carried over unchanged.
"""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Ok, Result

from .either import Either, Left, Right


def to_result[L, R](either: Either[L, R]) -> Result[R, L]:
    """
    Convert Either into a kungfu Result.

    Example:
        to_result(to_right(42))     # Ok(42)
        to_result(to_left("boom"))  # Error("boom")
    """
    match either:
        case Right(value):
            return Ok(value)
        case Left(err):
            return Error(err)


def from_result[T, E](result: Result[T, E]) -> Either[E, T]:
    """Convert a kungfu Result into Either. Inverse of to_result()."""
    match result:
        case Ok(value):
            return Right(value)
        case Error(err):
            return Left(err)


def to_interp[L, R](either: Either[L, R]) -> LazyCoroResult[R, L]:
    """
    Lift an already-computed Either into a LazyCoroResult.

    **When to use:** Feeding a synchronous Either-returning step into an
    async pipeline built on LazyCoroResult.

    NOTE: This is NOT lazy. The Either is already computed, only the
          conversion is deferred.
    """

    async def run() -> Result[R, L]:
        return to_result(either)

    return LazyCoroResult(run)


__all__ = (
    "to_result",
    "from_result",
    "to_interp",
)
