"""
Optics
======

Lens - accessor/replacer pair, type-changing form
SimpleLens - same-type refinement with its own composition
"""

from .chain import compose, compose_simple, identity_lens
from .lens import Lens
from .simple import SimpleLens

__all__ = (
    "Lens",
    "SimpleLens",
    "identity_lens",
    "compose",
    "compose_simple",
)
