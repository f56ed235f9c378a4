"""Pydantic Schemas — request validation for the users API.

Invariants:
    - Schemas validate at the use-case boundary, not in the route signature
    - Responses are shaped by core/format_user, not by response models
    - Field order in each model is the order violations are reported in
"""
