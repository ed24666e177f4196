"""ORM Models — SQLAlchemy declarative models for users and comments.

Invariants:
    - All models inherit from Base (db/base.py)
    - Users and comments are independent tables (no relationships)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all and alembic
"""

from secureboard.models.user import User  # noqa: F401
from secureboard.models.comment import Comment  # noqa: F401
