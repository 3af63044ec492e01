from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from lenses import SimpleLens  # noqa: E402


@dataclass(frozen=True, slots=True)
class Address:
    city: str
    zip_code: str


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    address: Address


user_address: SimpleLens[User, Address] = SimpleLens(
    lambda u: u.address,
    lambda a, u: User(u.id, u.name, a),
)

address_city: SimpleLens[Address, str] = SimpleLens(
    lambda a: a.city,
    lambda c, a: Address(c, a.zip_code),
)

address_zip: SimpleLens[Address, str] = SimpleLens(
    lambda a: a.zip_code,
    lambda z, a: Address(a.city, z),
)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
