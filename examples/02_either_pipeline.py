from __future__ import annotations

import asyncio

from _infra import Address, User, address_zip, banner, run, user_address

from kungfu import Error, Ok
from lenses import Either, Left, Right, to_interp, to_left, to_right


def parse_zip(raw: str) -> Either[str, str]:
    return to_right(raw) if raw.isdigit() and len(raw) == 5 else to_left(f"bad zip: {raw!r}")


def relocate(user: User, raw_zip: str) -> Either[str, User]:
    zip_code = user_address.and_then_simple(address_zip)
    return parse_zip(raw_zip).map(lambda z: zip_code.set(z, user))


def main() -> None:
    banner("02_either_pipeline: map + flat_map + lazy_or + kungfu bridge")

    bob = User(id=2, name="bob", address=Address(city="berlin", zip_code="10115"))

    for raw in ("10999", "nope"):
        match relocate(bob, raw).lazy_or(lambda: to_right(bob)):
            case Right(user):
                print(f"ok: {user.address}")
            case Left(err):
                print(f"error: {err}")

    async def pipeline() -> None:
        result = await to_interp(relocate(bob, "1"))
        match result:
            case Ok(user):
                print(f"ok: {user}")
            case Error(err):
                print(f"error: {err}")

    asyncio.run(pipeline())


if __name__ == "__main__":
    run(main)
