"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Driver exceptions never escape as-is: mapped to DatabaseError
"""
