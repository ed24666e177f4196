"""Password Hashing — bcrypt output format and verification."""

from secureboard.infrastructure.password_hashing import (
    hash_password, hash_password_async, verify_password,
)


def test_hash_is_bcrypt_and_not_plaintext():
    digest = hash_password("hunter2", rounds=4)
    assert digest.startswith("$2b$04$")
    assert "hunter2" not in digest


def test_hash_is_salted():
    assert hash_password("same", rounds=4) != hash_password("same", rounds=4)


def test_verify_password_roundtrip():
    digest = hash_password("correct horse", rounds=4)
    assert verify_password("correct horse", digest)
    assert not verify_password("wrong", digest)


async def test_async_hash_verifies():
    digest = await hash_password_async("threaded", rounds=4)
    assert verify_password("threaded", digest)
