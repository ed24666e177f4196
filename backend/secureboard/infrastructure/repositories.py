"""SQL Repositories — SQLAlchemy implementations of the core store protocols.

Invariants:
    - Every statement is built with select()/ORM inserts; user input is only a bound value
    - Outward projections never include users.password
    - Inserts commit immediately and return the store-assigned id

Design Decisions:
    - Column projections (select(User.id, User.name)) over full entities: the credential
      column is never loaded into memory for read paths
    - Repositories take an AsyncSession and never own its lifecycle (get_db does)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from secureboard.core.domain_types import (
    CommentId, CommentRecord, UserId, UserIdRecord, UserRecord,
)
from secureboard.models.comment import Comment
from secureboard.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """UserRepository backed by the users table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def lookup_by_identifier(self, user_id: UserId) -> UserRecord | None:
        result = await self._db.execute(
            select(User.id, User.name).where(User.id == user_id),
        )
        row = result.first()
        if row is None:
            return None
        return {"id": row.id, "name": row.name}

    async def insert(self, name: str, password_hash: str) -> UserId:
        user = User(name=name, password=password_hash)
        self._db.add(user)
        await self._db.commit()
        await self._db.refresh(user)
        logger.info("User inserted", extra={"user_id": user.id})
        return UserId(user.id)

    async def list_all(self) -> list[UserIdRecord]:
        result = await self._db.execute(select(User.id).order_by(User.id))
        return [{"id": user_id} for user_id in result.scalars().all()]


class SqlCommentRepository:
    """CommentRepository backed by the comments table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(self, content: str) -> CommentId:
        comment = Comment(content=content)
        self._db.add(comment)
        await self._db.commit()
        await self._db.refresh(comment)
        logger.info("Comment inserted", extra={"comment_id": comment.id})
        return CommentId(comment.id)

    async def list_all(self) -> list[CommentRecord]:
        """Newest first."""
        result = await self._db.execute(
            select(Comment.id, Comment.content).order_by(Comment.id.desc()),
        )
        return [{"id": row.id, "content": row.content} for row in result.all()]
