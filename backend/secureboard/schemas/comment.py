"""Comment Schemas — creation request and stored comment projection."""

from typing import Any

from pydantic import BaseModel


class CommentCreate(BaseModel):
    """POST /comment body. `content` is validated by sanitize_comment, not by Pydantic."""
    content: Any = None


class CommentCreated(BaseModel):
    success: bool = True
    id: int


class CommentResponse(BaseModel):
    id: int
    content: str
