"""Core Layer — pure validation and domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validators are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: validators run before any store call
"""
