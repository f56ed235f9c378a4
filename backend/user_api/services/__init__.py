"""Services Layer — one use case per user operation.

Invariants:
    - Each use case: validate raw input -> one repository read -> at most one write
    - Use cases are stateless beyond their injected repository (safe to share)
    - Classified errors propagate; nothing is caught and suppressed here
"""
