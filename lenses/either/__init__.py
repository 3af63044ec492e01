"""
Either
======

Left - failure payload
Right - success payload

Bridges to kungfu's Result live in the convert module.
"""

from .convert import from_result, to_interp, to_result
from .either import Either, Left, Right, pure, to_left, to_right

__all__ = (
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
