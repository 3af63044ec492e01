from __future__ import annotations

import typing


class VariantMismatchError(TypeError):
    """Unsafe unwrap was called on the other Either variant."""

    expected: typing.Literal["Left", "Right"]
    actual: typing.Literal["Left", "Right"]

    def __init__(
        self,
        expected: typing.Literal["Left", "Right"],
        actual: typing.Literal["Left", "Right"],
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"This is a {actual}!")


__all__ = ("VariantMismatchError",)
