"""API Layer — FastAPI routes, the user controller, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON envelopes ({data, message} or {status, message})
"""
