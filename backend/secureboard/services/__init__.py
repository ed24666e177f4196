"""Services Layer — multi-step operations that span infrastructure collaborators.

Invariants:
    - Services depend on core protocols, not on concrete repositories
"""
