"""Comment ORM — public comment board entries.

Invariants:
    - content is stored already sanitized (no unescaped &, <, >, ")
    - Comments are append-only: never updated or deleted
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from secureboard.db.base import Base


class Comment(Base):
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
