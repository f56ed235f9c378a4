"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Implementations raise InternalServerError on store failure, never a driver error

Design Decisions:
    - Protocol over ABC: structural subtyping, the test fake needs no base class
"""

from typing import Protocol

from user_api.core.domain_types import User, UserId


class UserRepository(Protocol):
    """Contract for user persistence, implemented by shell."""
    async def find_by_id(self, user_id: UserId) -> User | None: ...
    async def find_by_email(self, email: str) -> User | None: ...
    async def save(self, user: User) -> User: ...
    async def delete(self, user_id: UserId) -> None: ...
