"""Infrastructure Layer — database gateway and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All storage failures mapped to DatabaseError (core/errors.py)
"""
