from __future__ import annotations

from _infra import Address, User, address_city, banner, run, user_address


def main() -> None:
    banner("01_quickstart: view + over + set through composed lenses")

    alice = User(id=1, name="alice", address=Address(city="berlin", zip_code="10115"))
    city = user_address.and_then_simple(address_city)

    print(city.view(alice))
    print(city.over(str.title, alice))
    print(city.set("paris", alice))

    # Locality: alice herself never changes.
    print(alice)


if __name__ == "__main__":
    run(main)
