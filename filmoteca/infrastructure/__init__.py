"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - All store failures mapped to DatabaseError before reaching callers
"""
