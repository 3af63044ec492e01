"""
Lenses and Either for immutable data.

Two independent building blocks:
- Lens / SimpleLens: composable view-and-rebuild of a part nested in an
  immutable whole
- Either: Left (failure) or Right (success) with short-circuiting combinators

Architecture:
- lenses.optic  - Lens, SimpleLens, identity lens, n-ary composition
- lenses.either - Either, Left, Right and bridges to kungfu's Result
"""

# Core types
from ._types import Accessor, Mapper, Replacer, Thunk

# Errors
from ._errors import VariantMismatchError

# Internal helpers
from . import _helpers

# Optics
from . import optic
from .optic import Lens, SimpleLens, compose, compose_simple, identity_lens

# Either
from . import either
from .either import (
    Either,
    Left,
    Right,
    from_result,
    pure,
    to_interp,
    to_left,
    to_result,
    to_right,
)

__all__ = (
    # Types
    "Accessor",
    "Mapper",
    "Replacer",
    "Thunk",
    # Errors
    "VariantMismatchError",
    # Optics
    "optic",
    "Lens",
    "SimpleLens",
    "identity_lens",
    "compose",
    "compose_simple",
    # Either
    "either",
    "Either",
    "Left",
    "Right",
    "to_left",
    "to_right",
    "pure",
    "to_result",
    "from_result",
    "to_interp",
)
