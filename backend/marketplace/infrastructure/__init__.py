"""Infrastructure Layer — database engine, logging, and credential hashing.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store failures surface as DatabaseError (core/errors.py)
"""
