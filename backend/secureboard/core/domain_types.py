"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId and CommentId are positive integers assigned by the store
    - Records handed out of the store never carry the password hash

Design Decisions:
    - NewType over wrappers: zero runtime cost, full type-checker support
    - TypedDict records: routes return them directly as JSON
"""

from typing import NewType, TypedDict


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
CommentId = NewType("CommentId", int)


# ─── Records ─────────────────────────────────────────────────────

class UserIdRecord(TypedDict):
    """Listing projection — id only."""
    id: int


class UserRecord(TypedDict):
    """Lookup projection — id and display name, never the credential."""
    id: int
    name: str


class CommentRecord(TypedDict):
    id: int
    content: str
