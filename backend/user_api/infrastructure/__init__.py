"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Store failures leave this layer only as InternalServerError
"""
