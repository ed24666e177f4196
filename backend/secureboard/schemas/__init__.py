"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Request schemas accept any JSON value for id/content; the core validators
      decide validity so rejections carry the fixed client-facing messages
    - Response schemas never declare a password field

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
