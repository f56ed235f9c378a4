"""User Response Formatting — strips the password and applies the negotiated projection.

Invariants:
    - Password is never part of any projection
    - FULL is {id, name, email}; SIMPLE is {id, name}
    - Missing or unrecognized Accept header means FULL
"""

from user_api.core.domain_types import SIMPLE_MEDIA_TYPE, ResponseShape, User


def negotiate_shape(accept: str | None) -> ResponseShape:
    """Pick the projection requested by an Accept header value."""
    if accept and SIMPLE_MEDIA_TYPE in accept:
        return ResponseShape.SIMPLE
    return ResponseShape.FULL


def to_user_response(user: User) -> dict:
    """Full public projection of a user."""
    return {"id": user.id, "name": user.name, "email": user.email}


def format_user(user: User, accept: str | None = None) -> dict:
    """Project a user for the client according to its Accept header."""
    dto = to_user_response(user)
    if negotiate_shape(accept) is ResponseShape.SIMPLE:
        return {"id": dto["id"], "name": dto["name"]}
    return dto
