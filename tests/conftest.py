from __future__ import annotations

from dataclasses import dataclass

import pytest

from lenses import Lens, SimpleLens


@dataclass(frozen=True)
class Box:
    content1: int
    content2: int


@dataclass(frozen=True)
class RecBox:
    inner: Box


@dataclass(frozen=True)
class Shelf:
    top: RecBox
    label: str


@pytest.fixture
def box() -> Box:
    return Box(5, 10)


@pytest.fixture
def rec_box() -> RecBox:
    return RecBox(Box(5, 10))


@pytest.fixture
def lens1() -> SimpleLens[Box, int]:
    return SimpleLens(lambda b: b.content1, lambda i, b: Box(i, b.content2))


@pytest.fixture
def lens2() -> SimpleLens[Box, int]:
    return SimpleLens(lambda b: b.content2, lambda i, b: Box(b.content1, i))


@pytest.fixture
def lens_rec() -> SimpleLens[RecBox, Box]:
    return SimpleLens(lambda rb: rb.inner, lambda b, rb: RecBox(b))


@pytest.fixture
def lens_top() -> SimpleLens[Shelf, RecBox]:
    return SimpleLens(lambda s: s.top, lambda rb, s: Shelf(rb, s.label))


@pytest.fixture
def general_lens1() -> Lens[Box, Box, int, int]:
    return Lens(lambda b: b.content1, lambda i, b: Box(i, b.content2))
