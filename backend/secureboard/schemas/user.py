"""User Schemas — lookup request and public user projections."""

from typing import Any

from pydantic import BaseModel


class UserLookupRequest(BaseModel):
    """POST /user body. `id` is validated by parse_identifier, not by Pydantic."""
    id: Any = None


class UserIdResponse(BaseModel):
    id: int


class UserResponse(BaseModel):
    """Public user data — the credential is deliberately absent."""
    id: int
    name: str


class PopulateResponse(BaseModel):
    inserted: int
    message: str
