"""Infrastructure Layer — database, external HTTP service, hashing, logging.

Invariants:
    - Infrastructure never embeds validation rules (those live in core/)
    - All external and database failures mapped to SecureBoardError subclasses

Design Decisions:
    - Resilient wrappers over raw clients: routes never see httpx or SQLAlchemy errors
"""
