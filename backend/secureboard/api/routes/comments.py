"""Comment Routes — sanitized creation and newest-first listing.

Invariants:
    - POST /comment runs require_sanitized_comment before the repository is touched
    - Only the escaped form of the content is ever persisted

Design Decisions:
    - 200 with {"success": true, "id": n} on create: matches what the React client checks
"""

from fastapi import APIRouter, Depends

from secureboard.api.dependencies import (
    get_comment_repository, require_sanitized_comment,
)
from secureboard.core.repository_protocols import CommentRepository
from secureboard.schemas.comment import CommentCreated, CommentResponse

router = APIRouter(tags=["comments"])


@router.post("/comment", response_model=CommentCreated)
async def create_comment(
    content: str = Depends(require_sanitized_comment),
    comments: CommentRepository = Depends(get_comment_repository),
):
    """Persist a sanitized comment."""
    comment_id = await comments.insert(content)
    return CommentCreated(id=comment_id)


@router.get("/comments", response_model=list[CommentResponse])
async def list_comments(
    comments: CommentRepository = Depends(get_comment_repository),
):
    """List comments, newest first."""
    return await comments.list_all()
