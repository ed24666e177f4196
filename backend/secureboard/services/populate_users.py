"""User Seeding — fetch random identities, hash their passwords, insert them.

Invariants:
    - Passwords are bcrypt-hashed before they reach the repository
    - Inserts go through UserRepository.insert only (parameterized)
    - Fetch failures abort the whole batch before anything is inserted

Design Decisions:
    - Hashes computed concurrently in worker threads, inserts applied sequentially:
      one AsyncSession must not be shared across concurrent awaits
"""

import asyncio
import logging

from secureboard.core.domain_types import UserId
from secureboard.core.repository_protocols import UserRepository
from secureboard.infrastructure.password_hashing import hash_password_async
from secureboard.infrastructure.random_user_client import RandomUserClient

logger = logging.getLogger(__name__)


async def populate_users(
    users: UserRepository,
    client: RandomUserClient,
    count: int,
    hash_rounds: int = 10,
) -> list[UserId]:
    """Seed `count` users from the random user service. Returns the new ids."""
    fetched = await client.fetch_users(count)
    hashes = await asyncio.gather(
        *(hash_password_async(u.password, hash_rounds) for u in fetched),
    )
    inserted = [
        await users.insert(u.name, password_hash)
        for u, password_hash in zip(fetched, hashes)
    ]
    logger.info(f"Inserted {len(inserted)} hashed users into database")
    return inserted
