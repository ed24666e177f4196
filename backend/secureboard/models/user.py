"""User ORM — seeded accounts with bcrypt-hashed credentials.

Invariants:
    - id is an autoincrement integer primary key
    - password holds a bcrypt hash, never plain text
    - password is never selected by outward-facing queries (see repositories)
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from secureboard.db.base import Base


class User(Base):
    """Seeded user account."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)
