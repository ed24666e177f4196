"""User Routes — listing, validated lookup by id, and random-user seeding.

Invariants:
    - POST /user runs require_valid_identifier before the repository is touched
    - Lookup answers a list of zero or one {id, name}; the password is never returned
    - There is no endpoint accepting query text; lookups are exact-match by bound id

Design Decisions:
    - Paths kept unprefixed (/users, /user, /populate): the React client calls them as-is
    - POST for lookup: the id travels in a JSON body, never concatenated into SQL
"""

import logging

from fastapi import APIRouter, Depends

from secureboard.api.dependencies import (
    get_random_user_client, get_user_repository, require_valid_identifier,
)
from secureboard.config import Settings, get_settings
from secureboard.core.domain_types import UserId
from secureboard.core.repository_protocols import UserRepository
from secureboard.infrastructure.random_user_client import RandomUserClient
from secureboard.schemas.user import PopulateResponse, UserIdResponse, UserResponse
from secureboard.services.populate_users import populate_users

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.get("/users", response_model=list[UserIdResponse])
async def list_users(users: UserRepository = Depends(get_user_repository)):
    """List all user ids."""
    return await users.list_all()


@router.post("/user", response_model=list[UserResponse])
async def lookup_user(
    user_id: UserId = Depends(require_valid_identifier),
    users: UserRepository = Depends(get_user_repository),
):
    """Look up one user by id. Returns [] when no such user exists."""
    record = await users.lookup_by_identifier(user_id)
    if record is None:
        logger.info("User lookup miss", extra={"user_id": user_id})
        return []
    return [record]


@router.get("/populate", response_model=PopulateResponse)
async def populate(
    users: UserRepository = Depends(get_user_repository),
    client: RandomUserClient = Depends(get_random_user_client),
    settings: Settings = Depends(get_settings),
):
    """Insert `populate_count` random users with bcrypt-hashed passwords."""
    inserted = await populate_users(
        users, client, settings.populate_count,
        hash_rounds=settings.password_hash_rounds,
    )
    return PopulateResponse(
        inserted=len(inserted),
        message=f"Inserted {len(inserted)} users into database.",
    )
