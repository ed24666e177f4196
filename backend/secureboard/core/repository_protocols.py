"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Store access is limited to exact-match lookup, insert and full listing
    - No method accepts query text; user input only ever travels as a bound value

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, the validators that guard them do not
"""

from typing import Protocol

from secureboard.core.domain_types import (
    CommentId, CommentRecord, UserId, UserIdRecord, UserRecord,
)


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def lookup_by_identifier(self, user_id: UserId) -> UserRecord | None: ...
    async def insert(self, name: str, password_hash: str) -> UserId: ...
    async def list_all(self) -> list[UserIdRecord]: ...


class CommentRepository(Protocol):
    """Contract for comment persistence — implemented by shell."""
    async def insert(self, content: str) -> CommentId: ...
    async def list_all(self) -> list[CommentRecord]: ...
