"""User API Package — account management service (create, read, update, delete, login).

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
