"""Domain Types — the user entity and the value types around it.

Invariants:
    - User.id is None until the store assigns one
    - A stored id is always within 1..MAX_USER_ID
    - User carries the password; it never leaves the service (see format_user)
    - ResponseShape enumerates every projection a client can negotiate
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


UserId = NewType("UserId", int)

# users.id is a 32-bit INTEGER column; larger ids cannot exist in the store
MAX_USER_ID = 2**31 - 1

SIMPLE_MEDIA_TYPE = "application/vnd.simple+json"


@dataclass
class User:
    """User account as seen by use cases."""
    name: str
    email: str
    password: str
    id: UserId | None = None


class ResponseShape(str, Enum):
    """User projections selectable via the Accept header."""
    FULL = "full"
    SIMPLE = "simple"
