"""SecureBoard Application Package — users and comments behind validated, parameterized access.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
