from __future__ import annotations

import asyncio
import logging

import pytest
from kungfu import Error, Ok

from lenses import (
    Either,
    Left,
    Right,
    VariantMismatchError,
    from_result,
    pure,
    to_interp,
    to_left,
    to_result,
    to_right,
)
from lenses._helpers import identity


def parse_int(raw: str) -> Either[str, int]:
    if raw.lstrip("-").isdigit():
        return to_right(int(raw))
    return to_left(f"not a number: {raw}")


def positive(n: int) -> Either[str, int]:
    return to_right(n) if n > 0 else to_left("not positive")


class TestConstruction:
    """Constructors and tag queries"""

    def test_left(self):
        e = to_left("err")
        assert e.is_left()
        assert not e.is_right()
        assert isinstance(e, Left)

    def test_right(self):
        e = to_right(1)
        assert e.is_right()
        assert not e.is_left()
        assert isinstance(e, Right)

    def test_pure_is_right(self):
        assert pure(3) == to_right(3)

    def test_static_constructors(self):
        assert Either.to_left("x") == Left("x")
        assert Either.to_right(1) == Right(1)
        assert Either.pure(1) == Right(1)

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            Either()  # type: ignore[abstract]

    def test_third_variant_rejected(self):
        with pytest.raises(TypeError, match="exactly two variants"):

            class Middle(Either[str, int]):  # noqa: F841
                pass

    def test_variant_subclass_rejected(self):
        with pytest.raises(TypeError, match="cannot define"):

            class LoudLeft(Left[str, int]):  # noqa: F841
                pass

    def test_equality_respects_variant(self):
        assert Left(1) != Right(1)
        assert Left(1) == Left(1)
        assert hash(Right("a")) == hash(Right("a"))

    def test_repr(self):
        assert repr(Left("boom")) == "Left('boom')"
        assert repr(Right(1)) == "Right(1)"


class TestUnwrap:
    """Unsafe and safe extraction"""

    def test_from_left(self):
        assert to_left("err").from_left() == "err"

    def test_from_right(self):
        assert to_right(5).from_right() == 5

    def test_from_right_on_left_raises(self):
        with pytest.raises(VariantMismatchError, match="This is a Left!") as exc:
            to_left("err").from_right()
        assert exc.value.expected == "Right"
        assert exc.value.actual == "Left"

    def test_from_left_on_right_raises(self):
        with pytest.raises(TypeError, match="This is a Right!"):
            to_right(5).from_left()

    def test_mismatch_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lenses.either.either"):
            with pytest.raises(VariantMismatchError):
                to_right(5).from_left()
        assert "from_left() called on Right(5)" in caplog.text

    def test_safe_accessors(self):
        assert to_left("err").left() == "err"
        assert to_left("err").right() is None
        assert to_right(1).right() == 1
        assert to_right(1).left() is None

    def test_pattern_matching(self):
        match parse_int("12"):
            case Right(value):
                assert value == 12
            case Left(_):
                pytest.fail("expected Right")

        match parse_int("x"):
            case Left(err):
                assert err == "not a number: x"
            case Right(_):
                pytest.fail("expected Left")

    def test_fold(self):
        assert to_right(2).fold(len, lambda n: n * 10) == 20
        assert to_left("abc").fold(len, lambda n: n * 10) == 3


class TestAlternative:
    """or_, | and lazy_or"""

    def test_or_keeps_right(self):
        first = to_right(1)
        assert first.or_(to_right(2)) is first

    def test_or_takes_other_on_left(self):
        assert to_left("a").or_(to_right(2)) == Right(2)
        assert to_left("a").or_(to_left("b")) == Left("b")

    def test_pipe_operator(self):
        assert (to_left("a") | to_left("b") | to_right(3)) == Right(3)

    def test_lazy_or_not_called_on_right(self):
        calls: list[int] = []

        def alternative() -> Either[str, int]:
            calls.append(1)
            return to_right(2)

        assert to_right(1).lazy_or(alternative) == Right(1)
        assert calls == []

    def test_lazy_or_called_on_left(self):
        assert to_left("a").lazy_or(lambda: to_right(2)) == Right(2)


class TestFunctorMonad:
    """map, flat_map and their laws"""

    def test_map_right(self):
        assert to_right(2).map(lambda n: n + 1) == Right(3)

    def test_map_left_keeps_payload(self):
        err = to_left("err")
        mapped = err.map(lambda n: n + 1)
        assert mapped == Left("err")
        assert mapped.from_left() is err.from_left()

    def test_left_is_absorbing(self):
        payload = object()
        result = to_left(payload).map(str).map(len).flat_map(positive)
        assert result.is_left()
        assert result.from_left() is payload

    def test_mapper_never_called_on_left(self):
        def boom(_: int) -> int:
            raise AssertionError("should not run")

        assert to_left("err").map(boom) == Left("err")
        assert to_left("err").flat_map(boom) == Left("err")

    def test_map_failure_propagates(self):
        def boom(_: int) -> int:
            raise ZeroDivisionError

        with pytest.raises(ZeroDivisionError):
            to_right(1).map(boom)

    def test_flat_map_failure_propagates(self):
        err = ZeroDivisionError("division by zero in step")

        def step(_: int) -> Either[str, int]:
            raise err

        with pytest.raises(ZeroDivisionError) as exc:
            to_right(1).flat_map(step)
        assert exc.value is err

    def test_flat_map_sequencing(self):
        assert parse_int("5").flat_map(positive) == Right(5)
        assert parse_int("-5").flat_map(positive) == Left("not positive")
        assert parse_int("x").flat_map(positive) == Left("not a number: x")

    def test_flat_map_returns_mapper_result(self):
        inner = to_right(10)
        assert to_right(1).flat_map(lambda _: inner) is inner

    @pytest.mark.parametrize("e", [to_right(4), to_left("err")])
    def test_map_identity(self, e):
        assert e.map(identity) == e

    @pytest.mark.parametrize("e", [to_right(4), to_left("err")])
    def test_right_identity(self, e):
        assert e.flat_map(pure) == e

    @pytest.mark.parametrize("x", [3, -3])
    def test_left_identity(self, x):
        assert pure(x).flat_map(positive) == positive(x)


class TestConvert:
    """Bridges to kungfu"""

    def test_to_result(self):
        match to_result(to_right(1)):
            case Ok(value):
                assert value == 1
            case Error(_):
                pytest.fail("expected Ok")

        match to_result(to_left("err")):
            case Error(err):
                assert err == "err"
            case Ok(_):
                pytest.fail("expected Error")

    def test_from_result(self):
        assert from_result(Ok(1)) == Right(1)
        assert from_result(Error("err")) == Left("err")

    def test_to_interp(self):
        async def run():
            return await to_interp(parse_int("7").flat_map(positive))

        result = asyncio.run(run())
        match result:
            case Ok(value):
                assert value == 7
            case Error(err):
                pytest.fail(f"unexpected error: {err!r}")
