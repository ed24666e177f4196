"""Password Hashing — bcrypt wrapper used when seeding users.

Invariants:
    - Plain-text passwords never leave this module's callers unhashed
    - Hashing runs off the event loop (bcrypt is CPU-bound by design)
"""

import asyncio

import bcrypt


def hash_password(password: str, rounds: int = 10) -> str:
    """Return a bcrypt hash (utf-8 text) for storage in users.password."""
    digest = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return digest.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash.

    The API has no login flow, so nothing in the service calls this. It exists
    to verify seeded hashes (tests, manual checks).
    """
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


async def hash_password_async(password: str, rounds: int = 10) -> str:
    """hash_password in a worker thread."""
    return await asyncio.to_thread(hash_password, password, rounds)
