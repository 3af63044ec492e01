"""
Core type definitions for lenses.

Function shapes accepted by lenses and Either combinators.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Accessor = pure function that extracts a part from a whole
type Accessor[S, A] = Callable[[S], A]

# Replacer = builds a new whole from a new part and the old whole
# NOTE: Must never mutate the whole it receives.
type Replacer[B, S, T] = Callable[[B, S], T]

# Mapper = plain unary function
type Mapper[A, B] = Callable[[A], B]

# Thunk = suspended computation, evaluated on demand
type Thunk[T] = Callable[[], T]

__all__ = (
    "Accessor",
    "Replacer",
    "Mapper",
    "Thunk",
)
