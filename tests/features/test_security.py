import asyncio

from api.features.auth.security import PasswordHasher
from api.features.conversation.service import derive_title


def test_hash_is_salted_and_verifies():
    hasher = PasswordHasher(rounds=4)

    first = asyncio.run(hasher.hash("pw1"))
    second = asyncio.run(hasher.hash("pw1"))

    assert first != second
    assert first.startswith("$2b$04$")
    assert asyncio.run(hasher.verify("pw1", first))
    assert not asyncio.run(hasher.verify("pw2", first))


def test_overlong_password_never_verifies():
    hasher = PasswordHasher(rounds=4)
    stored = asyncio.run(hasher.hash("p" * 72))

    assert PasswordHasher.fits("p" * 72)
    assert not PasswordHasher.fits("p" * 73)
    assert not asyncio.run(hasher.verify("p" * 73, stored))


def test_derived_title():
    assert derive_title("short question") == "short question"
    assert derive_title("q" * 50) == "q" * 50
    assert derive_title("q" * 51) == "q" * 50 + "..."
