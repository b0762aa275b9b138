"""Customer API Package — CRUD over a single customer table.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
