"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or models/
    - Repository access is declared here as Protocols, implemented by the shell
"""
