"""Request Dependencies — validators and store handles injected into route handlers.

Invariants:
    - Validation dependencies are declared BEFORE repository dependencies in every
      route signature, so a rejected request never touches the store
    - InvalidIdentifierError / EmptyContentError propagate to the global handler (400)
    - Repositories are built per request from the session yielded by get_db

Design Decisions:
    - FastAPI dependencies over middleware: each validator applies to exactly one
      route and hands the parsed value straight to the handler
    - Missing body treated like an absent field (None) so it maps to the same error
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from secureboard.config import Settings, get_settings
from secureboard.core.domain_types import UserId
from secureboard.core.repository_protocols import CommentRepository, UserRepository
from secureboard.core.sanitize_content import sanitize_comment
from secureboard.core.validate_identifier import parse_identifier
from secureboard.infrastructure.database import get_db
from secureboard.infrastructure.random_user_client import RandomUserClient
from secureboard.infrastructure.repositories import (
    SqlCommentRepository, SqlUserRepository,
)
from secureboard.schemas.comment import CommentCreate
from secureboard.schemas.user import UserLookupRequest


def require_valid_identifier(body: UserLookupRequest | None = None) -> UserId:
    """Parse body.id or raise InvalidIdentifierError."""
    return parse_identifier(body.id if body else None)


def require_sanitized_comment(body: CommentCreate | None = None) -> str:
    """Validate and escape body.content or raise EmptyContentError."""
    return sanitize_comment(body.content if body else None)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return SqlUserRepository(db)


def get_comment_repository(db: AsyncSession = Depends(get_db)) -> CommentRepository:
    return SqlCommentRepository(db)


async def get_random_user_client(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[RandomUserClient, None]:
    """Per-request upstream client, closed when the response is done."""
    async with RandomUserClient(
        settings.random_user_api_url,
        timeout_seconds=settings.random_user_timeout_seconds,
        max_retries=settings.random_user_max_retries,
        base_delay_ms=settings.random_user_base_delay_ms,
    ) as client:
        yield client
